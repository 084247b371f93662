"""Star patterns printed as text, with a small command-line front end."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Optional


def pyramid(lines: int) -> str:
    """Right-aligned triangle of ``"* "`` cells; line ``i`` (from 0) has ``i`` stars."""
    return "".join(
        " " * (lines - 1 - i) + "* " * i + "\n" for i in range(lines)
    )


def star_pyramid(rows: int) -> str:
    """Rows of ``" * "`` cells, row ``i`` (from 1) holding ``i`` of them.

    Each row is indented by ``rows`` less the number of stars already drawn,
    never below zero.
    """
    out = []
    drawn = 0
    for i in range(1, rows + 1):
        out.append(" " * max(0, rows - drawn) + " * " * i + "\n")
        drawn += i
    return "".join(out)


def mirrored_triangle(rows: int) -> str:
    """A shrinking left-aligned triangle of stars followed by a growing one."""
    widths = [*range(rows, 0, -1), *range(1, rows + 1)]
    return "".join("*" * width + "\n" for width in widths)


_PATTERNS: dict[str, Callable[[int], str]] = {
    "pyramid": pyramid,
    "star": star_pyramid,
    "mirrored": mirrored_triangle,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a pattern; the size comes from the arguments or from standard input."""
    parser = argparse.ArgumentParser(description="Print a star pattern.")
    parser.add_argument("size", nargs="?", type=int, help="number of lines")
    parser.add_argument(
        "--pattern", choices=sorted(_PATTERNS), default="pyramid", help="pattern to draw"
    )
    args = parser.parse_args(argv)
    size = args.size
    if size is None:
        token = sys.stdin.read().split()
        if not token:
            parser.error("no size given")
        try:
            size = int(token[0])
        except ValueError:
            parser.error(f"invalid size: {token[0]!r}")
    sys.stdout.write(_PATTERNS[args.pattern](size))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())