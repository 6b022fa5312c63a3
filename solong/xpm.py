"""Reading of XPM images into plain pixel grids."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from solong.colors import text_to_rgb

# Pixel value given to the transparent colour "None".
TRANSPARENT = 0xFF000000

_WORD_SPLIT = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: row-major 32-bit pixel values."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match image size")

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]

    def to_bytes(self, big_endian: bool) -> bytes:
        """Pack the pixels as 4 bytes each, in the requested byte order."""
        order = "big" if big_endian else "little"
        return b"".join((p & 0xFFFFFFFF).to_bytes(4, order) for p in self.pixels)


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def find_unquoted(text: str, pattern: str) -> int:
    """Return the first index of ``pattern`` outside double quotes, or -1."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    quoted = False
    for pos in range(len(text) - len(pattern) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(pattern, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quotes with spaces, keeping the length."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        stop = len(text) if end == -1 else end + 2
        text = _blank(text, begin, stop)
    while (begin := find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = _blank(text, begin, stop)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield, in order, every complete double-quoted string in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1 : end]
        pos = end + 1


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _parse_header(line: str | None) -> tuple[int, int, int, int]:
    if line is None:
        raise XpmError("missing XPM header")
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"incomplete XPM header: {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError(f"invalid XPM header: {line!r}")
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without colour value: {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    color = text_to_rgb(words[index], end)
    return line[:cpp], TRANSPARENT if color == -1 else color


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its value strings: header, colours, rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(next(source, None))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next(source, None)
        if line is None:
            raise XpmError("missing XPM colour line")
        key, color = _parse_color(line, cpp)
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    pixels: list[int] = []
    for row in range(height):
        line = next(source, None)
        if line is None:
            raise XpmError(f"missing XPM pixel row {row}")
        if len(line) < width * cpp:
            raise XpmError(f"XPM pixel row {row} is too short")
        pixels.extend(
            palette.get(line[col : col + cpp], 0) for col in range(0, width * cpp, cpp)
        )
    return XpmImage(width, height, tuple(pixels))


def xpm_from_data(data: Sequence[str]) -> XpmImage:
    """Decode an XPM image given as a list of its value strings."""
    return parse_xpm(data)


def read_xpm_file(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))