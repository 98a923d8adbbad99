"""Line-break normalization over raw byte streams."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

CR = 0x0D
LF = 0x0A


def normalize_line_breaks(data: Iterable[int]) -> Iterator[int]:
    """Convert CR (legacy Mac) and CRLF (Windows) line breaks into LF.

    A ``\\r`` is always emitted as ``\\n``. When the byte directly after it is
    ``\\n`` that byte is swallowed, so a CRLF pair yields exactly one ``\\n``.
    Every other byte passes through unchanged.
    """
    after_cr = False
    for byte in data:
        if byte == CR:
            after_cr = True
            yield LF
            continue
        if byte == LF and after_cr:
            after_cr = False
            continue
        after_cr = False
        yield byte
