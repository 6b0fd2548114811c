"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from solong.colors import lookup_color
from solong.strings import atoi
from solong.ximage import Image

TRANSPARENT_PIXEL = 0xFF000000

_HEX_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_WORD_SEPARATORS = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """An XPM pixmap could not be read or parsed."""


def find_unquoted(text: str, needle: str) -> int:
    """Return the index of needle in text outside double quotes, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split text on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces, keeping the length.

    A line comment is blanked up to and including its newline. Raises
    XpmError for a block comment that is never closed.
    """
    while (start := find_unquoted(text, "/*")) >= 0:
        end = text.find("*/", start + 2)
        if end < 0:
            raise XpmError(f"unterminated comment at offset {start}")
        stop = end + 2
        text = text[:start] + " " * (stop - start) + text[stop:]
    while (start := find_unquoted(text, "//")) >= 0:
        end = text.find("\n", start + 2)
        stop = end + 1 if end >= 0 else len(text)
        text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in text."""
    pos = 0
    while True:
        first = text.find('"', pos)
        if first < 0:
            return
        second = text.find('"', first + 1)
        if second < 0:
            return
        yield text[first + 1:second]
        pos = second + 1


def _signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def text_to_rgb(name: str, end: Optional[str] = None) -> int:
    """Return the colour given by an XPM colour word.

    "#RRGGBB" is read as hexadecimal. Otherwise the name, joined to end by
    a space when end is given, is looked up in the colour table; unknown
    names give 0 and "none" gives -1.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        sign, digits = match.group(1), match.group(2)
        value = int(digits, 16) if digits else 0
        return _signed32(-value if sign == "-" else value)
    if end is not None:
        name = f"{name} {end}"[:63]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM pixmap.

    The first string holds width, height, colour count and characters per
    pixel; then come the colour definitions and one string per row.
    Pixels of colour "none" become 0xFF000000, pixels of an undefined
    colour 0. Raises XpmError on malformed data.
    """
    source = iter(lines)
    words = split_words(_next(source, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header {' '.join(words[:4])!r}")

    # Short keys (one or two chars) let later definitions win, longer ones the first.
    later_wins = cpp <= 2
    colors: dict[str, int] = {}
    for number in range(ncolors):
        line = _next(source, f"colour definition {number}")
        spec = split_words(line[cpp:])
        try:
            index = spec.index("c")
        except ValueError:
            raise XpmError(f"colour definition {line!r} has no 'c' key") from None
        if index + 1 >= len(spec):
            raise XpmError(f"colour definition {line!r} has no colour")
        end = spec[index + 2] if index + 2 < len(spec) else None
        rgb = text_to_rgb(spec[index + 1], end)
        key = line[:cpp]
        if later_wins:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        line = _next(source, f"pixel row {y}")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = colors.get(line[cpp * x:cpp * (x + 1)], 0)
            if color == -1:
                color = TRANSPARENT_PIXEL
            image.set_pixel(x, y, color)
    return image


def load_xpm(path: Union[str, Path]) -> Image:
    """Read an XPM file, ignoring C comments, and return its image."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))