"""Command-line entry point: ``python -m dinorun`` or ``dinorun``."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="dinorun",
        description="Endless runner: press Space, Up or click to start and jump, M to mute.",
    )
    ap.add_argument(
        "--data-dir",
        type=Path,
        default=Path.home() / ".dinorun",
        help="Directory holding the saved high score and mute setting",
    )
    ap.add_argument("--seed", type=int, default=None, help="Seed for a repeatable obstacle stream")
    ap.add_argument("--fps", type=int, default=60, help="Target ticks per second")
    ap.add_argument("--mute", action="store_true", help="Start muted (saved like a toggle)")
    ap.add_argument("--debug", action="store_true", help="Verbose logging")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    # Tk and pygame are only needed once we actually open a window.
    from dinorun.app.game_app import GameApp

    app = GameApp(data_dir=args.data_dir, seed=args.seed, fps=args.fps, force_mute=args.mute)
    app.run()


if __name__ == "__main__":
    main()
