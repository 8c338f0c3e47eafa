"""Command-line entry point.

Usage:
    python -m xpdispatch palette [--outline]
    python -m xpdispatch favorites
"""

from __future__ import annotations

import argparse
import logging

from xpdispatch.services.surface_colors import (
    PAVEMENT_FILL_FALLBACK,
    PAVEMENT_OUTLINE_FALLBACK,
    surface_palette,
)
from xpdispatch.state.registry import get_launch_store

logger = logging.getLogger(__name__)


def _print_palette(outline: bool) -> None:
    for code, color in surface_palette(outline=outline):
        print(f"{code:>3}  {color}")
    print(f"  *  {PAVEMENT_OUTLINE_FALLBACK if outline else PAVEMENT_FILL_FALLBACK}")


def _print_favorites() -> None:
    favorites = get_launch_store().get_state().favorites
    if not favorites:
        print("No favorites.")
        return
    for path in favorites:
        print(path)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="xpdispatch", description="xpdispatch state tools")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    palette = sub.add_parser("palette", help="Print the surface color palette")
    palette.add_argument("--outline", action="store_true", help="Print outline colors")

    sub.add_parser("favorites", help="List persisted favorite aircraft")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "palette":
        _print_palette(args.outline)
    elif args.command == "favorites":
        _print_favorites()


if __name__ == "__main__":
    main()
