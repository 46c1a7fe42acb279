"""Small text helpers used by the XPM reader: word splitting and searches."""

from __future__ import annotations

__all__ = ["split_words", "find", "find_unquoted"]

_BLANKS = " \t"


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs.

    Only spaces and tabs separate words; other characters, newlines
    included, stay inside the word they belong to.
    """
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in _BLANKS:
            if current:
                words.append("".join(current))
                current.clear()
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str, limit: int) -> int:
    """Return the position of the first ``needle`` in ``text``, or -1.

    When the needle is longer than ``limit`` there can be no match and
    -1 is returned straight away.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches inside double-quoted runs.

    Every ``"`` met while scanning toggles the quoted state, so a needle
    that starts with a quote is never found.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    quoted = False
    last_start = len(text) - len(needle)
    for pos, char in enumerate(text[: last_start + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1