"""Tests for line-break normalization, splitting, and trailing-blank dropping."""

from __future__ import annotations

import unittest

from aocsolver.line_pipeline import (
    drop_lf_eof,
    normalize_line_breaks,
    read_lines,
    read_text_lines,
    split_lf_line_breaks,
)
from aocsolver.line_pipeline.fields import parse_int, split_once
from aocsolver.puzzle import PuzzleInputError

MULTI_LINE = [b"some", b"test", b"", b"with", b"multiple line", b"breaks"]


def _split(data: bytes) -> list[bytes]:
    return list(split_lf_line_breaks(iter(data)))


def _split_and_drop(data: bytes) -> list[bytes]:
    return list(drop_lf_eof(split_lf_line_breaks(iter(data))))


class NormalizeLineBreaksTests(unittest.TestCase):
    def test_converts_cr_and_crlf_to_lf(self) -> None:
        data = b"some\rtest\r\r\nwith\ndifferent\n\nline\r\nbreak\nstyles"
        expected = b"some\ntest\n\nwith\ndifferent\n\nline\nbreak\nstyles"

        self.assertEqual(bytes(normalize_line_breaks(data)), expected)

    def test_cr_before_end_of_input_is_converted(self) -> None:
        self.assertEqual(bytes(normalize_line_breaks(b"test\r")), b"test\n")

    def test_output_never_contains_cr(self) -> None:
        data = b"\r\r\n\n\r\r\ra\rb\r\n"
        normalized = bytes(normalize_line_breaks(data))

        self.assertNotIn(b"\r", normalized)
        self.assertEqual(normalized, b"\n\n\n\n\n\na\nb\n")

    def test_other_bytes_pass_through(self) -> None:
        data = bytes(range(256)).replace(b"\r", b"")
        self.assertEqual(bytes(normalize_line_breaks(data)), data)

    def test_consumes_iterators_lazily(self) -> None:
        normalized = normalize_line_breaks(iter(b"a\r\nb"))
        self.assertEqual(next(normalized), ord("a"))
        self.assertEqual(next(normalized), ord("\n"))
        self.assertEqual(next(normalized), ord("b"))


class SplitLineBreaksTests(unittest.TestCase):
    def test_splits_on_lf_and_keeps_inner_empty_lines(self) -> None:
        self.assertEqual(_split(b"some\ntest\n\nwith\nmultiple line\nbreaks"), MULTI_LINE)
        self.assertEqual(_split(b"a\nb\n\nc"), [b"a", b"b", b"", b"c"])

    def test_empty_input_yields_one_empty_line(self) -> None:
        self.assertEqual(_split(b""), [b""])

    def test_trailing_newline_yields_trailing_empty_line(self) -> None:
        self.assertEqual(_split(b"a\n"), [b"a", b""])


class DropLfEofTests(unittest.TestCase):
    def test_keeps_empty_lines_that_are_not_at_the_end(self) -> None:
        self.assertEqual(_split_and_drop(b"some\ntest\n\nwith\nmultiple line\nbreaks"), MULTI_LINE)

    def test_drops_an_empty_line_before_eof(self) -> None:
        self.assertEqual(_split_and_drop(b"some\ntest\n\nwith\nmultiple line\nbreaks\n"), MULTI_LINE)

    def test_keeps_last_line_holding_whitespace(self) -> None:
        self.assertEqual(
            _split_and_drop(b"some\ntest\n\nwith\nmultiple line\nbreaks\n "),
            MULTI_LINE + [b" "],
        )

    def test_only_drops_a_single_empty_line_at_the_end(self) -> None:
        self.assertEqual(
            _split_and_drop(b"some\ntest\n\nwith\nmultiple line\nbreaks\n\n"),
            MULTI_LINE + [b""],
        )
        self.assertEqual(list(drop_lf_eof([b"a", b"b", b"", b""])), [b"a", b"b", b""])

    def test_empty_input_yields_nothing(self) -> None:
        self.assertEqual(list(drop_lf_eof([b""])), [])
        self.assertEqual(list(drop_lf_eof([])), [])


class ReadLinesTests(unittest.TestCase):
    def test_full_pipeline_handles_windows_input(self) -> None:
        self.assertEqual(list(read_lines(b"a\r\nb\r\n")), [b"a", b"b"])
        self.assertEqual(list(read_lines(b"a\r\nb\r\n", drop_trailing_blank=False)), [b"a", b"b", b""])

    def test_text_lines_are_decoded(self) -> None:
        self.assertEqual(list(read_text_lines("é\nx\n".encode("utf-8"))), ["é", "x"])

    def test_invalid_utf8_is_rejected(self) -> None:
        with self.assertRaises(PuzzleInputError):
            list(read_text_lines(b"\xff\n"))


class FieldParsingTests(unittest.TestCase):
    def test_parse_int_accepts_digits_only(self) -> None:
        self.assertEqual(parse_int(b"14848514"), 14848514)
        self.assertEqual(parse_int("007"), 7)
        for bad in (b"", b"-1", b"1a", b" 1", "٣"):
            with self.subTest(bad=bad), self.assertRaises(PuzzleInputError):
                parse_int(bad)

    def test_split_once_requires_delimiter(self) -> None:
        self.assertEqual(split_once(b",", b"2-4,6-8"), (b"2-4", b"6-8"))
        self.assertEqual(split_once(b" ", b"1 a b"), (b"1", b"a b"))
        with self.assertRaises(PuzzleInputError):
            split_once(b",", b"2-4")


if __name__ == "__main__":
    unittest.main()
