"""Line-oriented input pipeline shared by all solvers.

Raw bytes flow through three lazy stages:
- line-break normalization (CR and CRLF become LF)
- splitting on LF into ``bytes`` lines
- dropping the blank line a trailing newline leaves behind
"""

from __future__ import annotations

from .fields import decode_line, parse_int, read_text_lines, split_once
from .normalize import CR, LF, normalize_line_breaks
from .split import drop_lf_eof, read_lines, split_lf_line_breaks

__all__ = [
    "CR",
    "LF",
    "normalize_line_breaks",
    "split_lf_line_breaks",
    "drop_lf_eof",
    "read_lines",
    "read_text_lines",
    "decode_line",
    "parse_int",
    "split_once",
]
