"""Field-level parsing helpers shared by the line-oriented solvers.

Every helper raises ``PuzzleInputError`` on malformed data instead of
returning a sentinel; solvers never continue past a bad line.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..puzzle import PuzzleInputError
from .split import read_lines


def decode_line(line: bytes) -> str:
    """Decode one input line as UTF-8."""
    try:
        return line.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PuzzleInputError(f"line is not valid UTF-8: {line!r}") from exc


def parse_int(field: bytes | str) -> int:
    """Parse an unsigned decimal integer field."""
    text = field.decode("ascii", errors="replace") if isinstance(field, bytes) else field
    if not text.isascii() or not text.isdigit():
        raise PuzzleInputError(f"expected a number, got {text!r}")
    return int(text)


def split_once(delimiter: bytes, data: bytes) -> tuple[bytes, bytes]:
    """Split ``data`` at the first ``delimiter``; the delimiter must be present."""
    head, found, tail = data.partition(delimiter)
    if not found:
        raise PuzzleInputError(f"expected {delimiter!r} in {data!r}")
    return head, tail


def read_text_lines(data: Iterable[int], drop_trailing_blank: bool = True) -> Iterator[str]:
    """Decoded variant of ``read_lines``."""
    for line in read_lines(data, drop_trailing_blank=drop_trailing_blank):
        yield decode_line(line)
