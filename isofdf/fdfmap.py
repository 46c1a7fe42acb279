"""Reading of height maps: rows of whitespace-separated integers."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Union

__all__ = [
    "MapError",
    "HeightMap",
    "check_format",
    "count_values",
    "parse_line",
    "parse_map",
    "load_map",
]

_EXTENSION = ".fdf"


class MapError(ValueError):
    """Raised when a map is missing, malformed or has uneven rows."""


@dataclass(frozen=True)
class HeightMap:
    """A grid of heights; ``rows[y][x]`` is the height at column x, row y."""

    rows: tuple[tuple[int, ...], ...]

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    @property
    def width(self) -> int:
        """Number of values in each row."""
        return len(self.rows[0]) if self.rows else 0


def check_format(name: str) -> bool:
    """Return True if everything from the first dot of ``name`` is ``.fdf``."""
    dot = name.find(".")
    if dot == -1:
        return False
    return name[dot:] == _EXTENSION


def _tokens(line: str) -> Iterable[str]:
    """Yield the number tokens of one line, stopping at a newline.

    A token is an optional minus sign followed by any run of digits.
    Any character other than a space, a digit or a minus sign is an error.
    """
    content = line.split("\n", 1)[0]
    pos = 0
    while pos < len(content):
        char = content[pos]
        if char == " ":
            pos += 1
            continue
        if not (char.isascii() and char.isdigit()) and char != "-":
            raise MapError(f"unexpected character {char!r} in line {content!r}")
        start = pos
        if char == "-":
            pos += 1
        while pos < len(content) and content[pos].isascii() and content[pos].isdigit():
            pos += 1
        yield content[start:pos]


def count_values(line: str) -> int:
    """Return how many values ``line`` holds."""
    return sum(1 for _ in _tokens(line))


def _to_int(token: str) -> int:
    digits = token.lstrip("-")
    if not digits:
        return 0
    return int(token)


def parse_line(line: str) -> list[int]:
    """Return the values of one line; a lone minus sign reads as 0."""
    return [_to_int(token) for token in _tokens(line)]


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a :class:`HeightMap` from lines of text.

    The first line must exist and not be empty, and every line must hold
    as many values as the first.
    """
    source = iter(lines)
    first = next(source, None)
    if first is None or first == "" or first.startswith("\n"):
        raise MapError("map is empty")
    rows = [parse_line(first)]
    width = len(rows[0])
    for number, line in enumerate(source, start=2):
        row = parse_line(line)
        if len(row) != width:
            raise MapError(
                f"line {number} has {len(row)} values, expected {width}"
            )
        rows.append(row)
    return HeightMap(tuple(tuple(row) for row in rows))


def load_map(path: Union[str, PathLike]) -> HeightMap:
    """Read a map file and parse it."""
    with Path(path).open(encoding="ascii", errors="replace", newline="") as handle:
        return parse_map(handle)