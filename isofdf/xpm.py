"""Reader for XPM pixmaps, from files or from in-memory string lists."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .colors import color_by_name
from .image import Image
from .wordtab import find, find_unquoted, split_words

__all__ = [
    "TRANSPARENT",
    "XpmError",
    "strip_comments",
    "color_key",
    "text_rgb",
    "quoted_lines",
    "parse_xpm",
    "xpm_to_image",
    "xpm_file_to_image",
]

# Pixel value written for the colour "None".
TRANSPARENT = 0xFF000000

_NAME_LIMIT = 63
_HEX = re.compile(r"(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def _blank(text: str, opener: str, closer: str) -> str:
    while (start := find_unquoted(text, opener, len(text))) != -1:
        body = start + len(opener)
        end = find(text[body:], closer, len(text) - body)
        stop = len(text) if end == -1 else body + end + len(closer)
        text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    Block comments are removed first, then line comments together with
    the newline that ends them. The length of the text is unchanged.
    """
    text = _blank(text, "/*", "*/")
    return _blank(text, "//", "\n")


def color_key(chars: str) -> int:
    """Pack the characters naming a colour into one integer key."""
    key = 0
    for char in chars:
        key = (key << 8) + ord(char)
    return key


def text_rgb(name: str, end: Optional[str] = None) -> int:
    """Return the 0xRRGGBB value of a colour specification.

    ``#`` introduces a hexadecimal value. Otherwise ``name``, joined to
    ``end`` by a space when given, is looked up among the named colours.
    Unknown names and malformed hexadecimal values give 0.
    """
    if name.startswith("#"):
        match = _HEX.match(name, 1)
        return int(match.group(1), 16) if match else 0
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        first = text.find('"', pos)
        if first == -1:
            return
        second = text.find('"', first + 1)
        if second == -1:
            return
        yield text[first + 1 : second]
        pos = second + 1


def _atoi(word: str) -> int:
    match = _INT.match(word)
    return int(match.group(1)) if match else 0


def parse_xpm(lines: Iterable[str]) -> list[list[int]]:
    """Parse XPM lines into rows of pixel values.

    The lines are the header, the colour definitions and the pixel rows,
    without their quotes. Transparent pixels get :data:`TRANSPARENT`.
    """
    source = iter(lines)

    def take(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(take("header"))
    if len(header) < 4:
        raise XpmError(f"header needs four values, got {len(header)}")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header values: {' '.join(header[:4])}")

    # With one or two characters per pixel later definitions replace
    # earlier ones; with more, the first definition of a key is kept.
    direct = cpp <= 2
    palette: dict[int, int] = {}
    for _ in range(ncolors):
        line = take("colour definition")
        words = split_words(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour in definition {line!r}") from None
        if at >= len(words):
            raise XpmError(f"no colour in definition {line!r}")
        end = words[at + 1] if at + 1 < len(words) else None
        rgb = text_rgb(words[at], end)
        key = color_key(line[:cpp])
        if direct:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    rows: list[list[int]] = []
    for _ in range(height):
        line = take("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for start in range(0, width * cpp, cpp):
            color = palette.get(color_key(line[start : start + cpp]), 0)
            row.append(TRANSPARENT if color == -1 else color)
        rows.append(row)
    return rows


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an :class:`Image` from XPM lines."""
    rows = parse_xpm(lines)
    image = Image(len(rows[0]), len(rows))
    for y, row in enumerate(rows):
        for x, color in enumerate(row):
            image.set_pixel(x, y, color)
    return image


def xpm_file_to_image(path: Union[str, PathLike]) -> Image:
    """Read an XPM file and build an :class:`Image` from it."""
    text = Path(path).read_text(encoding="latin-1")
    return xpm_to_image(quoted_lines(strip_comments(text)))