"""Reading XPM images into rows of 0xRRGGBB pixel values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .colors import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value given to the colour ``None``: a set alpha byte marks it see-through."""

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"[0-9a-fA-F]+")
_NAME_LIMIT = 63


class XpmError(Exception):
    """Raised when an XPM image cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: its size and one tuple of pixel values per row."""

    width: int
    height: int
    pixels: Tuple[Tuple[int, ...], ...]


def split_words(line: str) -> List[str]:
    """Split *line* on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(line) if word]


def _find_outside_quotes(text: str, needle: str) -> int:
    inside = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, count: int) -> str:
    end = min(len(text), start + count)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside double quotes with spaces.

    The text keeps its length. A ``//`` comment is blanked together with the
    newline that ends it. A comment opener without its closer loses only the
    opener (and, for ``/*``, the character after it).
    """
    while (begin := _find_outside_quotes(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        span = (end - (begin + 2)) + 4 if end != -1 else 3
        text = _blank(text, begin, span)
    while (begin := _find_outside_quotes(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        span = (end - (begin + 2)) + 3 if end != -1 else 2
        text = _blank(text, begin, span)
    return text


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in *text*."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _as_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def text_to_rgb(name: str, extra: Optional[str] = None) -> int:
    """Turn an XPM colour specification into a pixel value.

    ``#RRGGBB`` is read as hexadecimal. Otherwise *name*, joined with *extra*
    when given, is looked up in the colour table; unknown names give 0 and
    ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _LEADING_HEX.match(name, 1)
        return _as_int32(int(match.group(0), 16)) if match else 0
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    value = lookup_color(name)
    return 0 if value is None else value


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_header(line: str) -> Tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("incomplete header")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if width == 0 or height == 0 or ncolors == 0 or cpp == 0:
        raise XpmError("header values must not be zero")
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError("header values must not be negative")
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> Tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError("colour line without a 'c' key") from None
    if index >= len(words):
        raise XpmError("colour line without a colour")
    extra = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[index], extra)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings (header, colours, pixel rows)."""
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, rgb = _parse_color(_next_line(source, "colour line"), cpp)
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        if len(line) < width * cpp:
            raise XpmError("pixel row is too short")
        row = []
        for start in range(0, width * cpp, cpp):
            colour = palette.get(line[start:start + cpp], 0)
            row.append(TRANSPARENT if colour == -1 else colour)
        rows.append(tuple(row))
    return XpmImage(width=width, height=height, pixels=tuple(rows))


def load_xpm(path: Union[str, "PathLike[str]"]) -> XpmImage:
    """Read and decode the XPM file at *path*."""
    try:
        with open(path, "rb") as stream:
            text = stream.read().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm(quoted_strings(strip_comments(text)))