"""Command-line entry point for the dungeon game."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .game import Game


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the game on standard input and output; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="dungeonrpg", description="A small text dungeon crawler."
    )
    parser.parse_args(argv)
    try:
        Game().run()
    except Exception as exc:  # report any failure and exit with an error code
        print(f"Fatal error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())