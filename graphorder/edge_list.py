"""Reader for whitespace, tab or comma separated edge-list files."""

from __future__ import annotations

import re
from pathlib import Path

VMAX = 2**32 - 1

Edge = tuple[int, int, float]

_EMPTY = re.compile(r"(?:[\r\n]|#[^\n]*)*")
_ID = re.compile(r"[0-9]+")
_SEPARATOR = re.compile(r"[\t, ]*")


class EdgeListError(ValueError):
    """Raised when an edge-list file cannot be read or parsed."""


def _line_of(text: str, pos: int) -> int:
    return text.count("\n", 0, pos)


def _eat_id(text: str, pos: int) -> tuple[int, int]:
    match = _ID.match(text, pos)
    if match is None:
        raise EdgeListError(f"Invalid vertex ID at line {_line_of(text, pos)}")
    value = 0
    for offset, digit in enumerate(match.group()):
        value = value * 10 + (ord(digit) - ord("0"))
        if value > VMAX:
            raise EdgeListError(
                f"Too large vertex ID at line {_line_of(text, pos + offset)}"
            )
    return value, match.end()


def parse_edges(text: str) -> list[Edge]:
    """Parse edges ``(source, target, 1.0)`` from edge-list text.

    Blank lines and lines starting with ``#`` are skipped; the two ids on a
    line may be separated by any run of tabs, commas and spaces.
    """
    edges: list[Edge] = []
    pos = 0
    end = len(text)
    while pos < end:
        pos = _EMPTY.match(text, pos).end()
        if pos >= end:
            break
        source, pos = _eat_id(text, pos)
        pos = _SEPARATOR.match(text, pos).end()
        target, pos = _eat_id(text, pos)
        pos = _SEPARATOR.match(text, pos).end()
        edges.append((source, target, 1.0))
    return edges


def read_edges(path: str | Path) -> list[Edge]:
    """Read and parse an edge-list file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise EdgeListError(f"cannot read {path}: {exc}") from exc
    return parse_edges(text)