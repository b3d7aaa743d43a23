from __future__ import annotations

from rich.console import Console

from tivoliwheel.cli import main
from tivoliwheel.core import SpinSample
from tivoliwheel.play import DEFAULT_LABELS, run_spin
from tivoliwheel.ui.presenters import RichPresenter


class _RecordingRenderer:
    def __init__(self) -> None:
        self.sectors = []
        self.rotations: list[SpinSample] = []
        self.winners: list[SpinSample] = []

    def draw_wheel(self, sectors) -> None:
        self.sectors = list(sectors)

    def show_rotation(self, sample: SpinSample) -> None:
        self.rotations.append(sample)

    def show_winner(self, sample: SpinSample) -> None:
        self.winners.append(sample)


def test_run_spin_draws_frames_and_winner(clock) -> None:
    renderer = _RecordingRenderer()
    sample = run_spin(
        renderer,
        ["A", "B", "C"],
        duration_ms=100,
        seed=5,
        fps=50,
        clock=clock,
        _sleep=lambda seconds: clock.advance(seconds * 1000),
    )
    assert sample.done
    assert sample.winner in {"A", "B", "C"}
    assert [s.label for s in renderer.sectors] == ["A", "B", "C"]
    assert renderer.winners == [sample]
    assert len(renderer.rotations) == 5
    assert all(not s.done for s in renderer.rotations)


def test_run_spin_is_reproducible_with_seed(clock) -> None:
    results = []
    for _ in range(2):
        renderer = _RecordingRenderer()
        results.append(
            run_spin(
                renderer,
                duration_ms=100,
                seed=77,
                shuffle=True,
                clock=clock,
                _sleep=lambda seconds: clock.advance(seconds * 1000),
            )
        )
        assert sorted(s.label for s in renderer.sectors) == sorted(DEFAULT_LABELS)
    assert results[0].winner == results[1].winner


def test_rich_presenter_renders_wheel_and_winner(clock) -> None:
    console = Console(record=True, width=100, force_terminal=False, color_system=None)
    presenter = RichPresenter(console=console)
    run_spin(
        presenter,
        duration_ms=60,
        seed=1,
        fps=50,
        clock=clock,
        _sleep=lambda seconds: clock.advance(seconds * 1000),
    )
    text = console.export_text()
    for label in DEFAULT_LABELS:
        assert label in text
    assert "Winning item" in text


def test_cli_spins_in_terminal(capsys) -> None:
    assert main(["Tea", "Coffee", "--duration", "20", "--seed", "3", "--fps", "200", "--no-color"]) == 0
    out = capsys.readouterr().out
    assert "Winning item" in out
    assert "Tea" in out and "Coffee" in out
