from __future__ import annotations

import argparse
import logging
import sys

from .play import DEFAULT_LABELS, run_spin
from .ui.presenters import RichPresenter


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tivoli-wheel", description="Spin a labeled selection wheel")
    p.add_argument("labels", nargs="*", help="Sector labels in order (defaults to a sample menu)")
    p.add_argument("--duration", type=float, default=None, metavar="MS", help="Spin duration in milliseconds")
    # If omitted, runs with a random seed for variety. Pass an int to reproduce.
    p.add_argument("--seed", type=int, default=None, help="RNG seed (random if omitted)")
    p.add_argument("--fps", type=float, default=30.0, help="Frames drawn per second while spinning")
    p.add_argument("--shuffle", action="store_true", help="Randomize the label order before spinning")
    p.add_argument("--no-color", action="store_true", help="Disable colored output (default is colored)")
    p.add_argument("--serve", action="store_true", help="Serve the web UI instead of spinning in the terminal")
    p.add_argument("--verbose", action="store_true", help="Log engine events to stderr")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.serve:
        from .web.app import main as serve

        serve()
        return 0

    presenter = RichPresenter(no_color=args.no_color)
    try:
        run_spin(
            presenter,
            args.labels or DEFAULT_LABELS,
            duration_ms=args.duration,
            seed=args.seed,
            fps=args.fps,
            shuffle=args.shuffle,
        )
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
