from __future__ import annotations

import math
from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TaskID, TextColumn
from rich.table import Table

from ..core.interfaces import Renderer
from ..core.models import Sector, SpinSample
from ..core.palette import DEFAULT_PALETTE, hex_color
from ..core.partition import resolve_index


class RichPresenter(Renderer):
    """Terminal renderer: sector table, live spin progress and the winner."""

    def __init__(self, *, no_color: bool = False, console: Console | None = None):
        if console is not None:
            self.console = console
        elif no_color:
            self.console = Console(force_terminal=False, color_system=None)
        else:
            self.console = Console(force_terminal=True, color_system="auto")
        self._sectors: tuple[Sector, ...] = ()
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def draw_wheel(self, sectors: Sequence[Sector]) -> None:
        self._sectors = tuple(sectors)
        table = Table(title="Wheel", show_header=True, header_style="bold blue", box=box.SIMPLE_HEAVY)
        table.add_column("#", justify="right", style="cyan", no_wrap=True)
        table.add_column("Label", style="bold")
        table.add_column("Span (deg)", justify="right")
        table.add_column("Color")
        for sector in self._sectors:
            fill = hex_color(DEFAULT_PALETTE[sector.color % len(DEFAULT_PALETTE)])
            span = f"{_deg(sector.start_angle):.1f}–{_deg(sector.end_angle):.1f}"
            table.add_row(str(sector.index + 1), sector.label, span, f"[{fill}]██[/] {fill}")
        self.console.print(table)

    def show_rotation(self, sample: SpinSample) -> None:
        if self._progress is None:
            self._progress = Progress(
                TextColumn("[bold cyan]Spinning[/]"),
                BarColumn(),
                TextColumn("{task.percentage:>3.0f}%"),
                TextColumn("[magenta]{task.fields[label]}[/]"),
                console=self.console,
                transient=True,
            )
            self._progress.start()
            self._task = self._progress.add_task("spin", total=1.0, label="")
        label = ""
        if self._sectors:
            label = self._sectors[resolve_index(sample.rotation, len(self._sectors))].label
        assert self._task is not None
        self._progress.update(self._task, completed=sample.progress, label=label)

    def show_winner(self, sample: SpinSample) -> None:
        self._stop_progress()
        turns = sample.rotation / math.tau
        body = f"[bold green]{sample.winner}[/]\n[dim]{turns:.2f} turns[/]"
        self.console.print(Panel(body, title="Winning item", border_style="green", expand=False))

    def _stop_progress(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task = None


def _deg(angle: float) -> float:
    return math.degrees(angle)
