"""Line splitting and end-of-input blank-line handling."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .normalize import LF, normalize_line_breaks


def split_lf_line_breaks(data: Iterable[int]) -> Iterator[bytes]:
    """Split a normalized byte stream on ``\\n``.

    The bytes after the last ``\\n`` are always emitted as a final line, so an
    input ending in ``\\n`` produces a trailing empty line and an empty input
    produces a single empty line.
    """
    buffer = bytearray()
    for byte in data:
        if byte == LF:
            yield bytes(buffer)
            buffer = bytearray()
        else:
            buffer.append(byte)
    yield bytes(buffer)


def drop_lf_eof(lines: Iterable[bytes]) -> Iterator[bytes]:
    """Drop the final line when it is empty.

    Undoes the extra element ``split_lf_line_breaks`` produces for a trailing
    newline. Empty lines elsewhere, and a final line holding only whitespace,
    are kept. At most one line is dropped.
    """
    iterator = iter(lines)
    try:
        pending = next(iterator)
    except StopIteration:
        return
    for line in iterator:
        yield pending
        pending = line
    if pending:
        yield pending


def read_lines(data: Iterable[int], drop_trailing_blank: bool = True) -> Iterator[bytes]:
    """Run the normalize -> split -> (drop) pipeline over raw input bytes."""
    lines = split_lf_line_breaks(normalize_line_breaks(data))
    if drop_trailing_blank:
        return drop_lf_eof(lines)
    return lines
