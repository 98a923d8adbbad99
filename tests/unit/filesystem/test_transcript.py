"""Tests for transcript replay and folder-size queries."""

from __future__ import annotations

import unittest

from aocsolver.filesystem import (
    REQUIRED_FREE_SPACE,
    SMALL_FOLDER_LIMIT,
    TOTAL_DISK_SPACE,
    FolderNode,
    build_file_system,
    smallest_folder_to_free,
    sum_of_small_folders,
)
from aocsolver.puzzle import PuzzleInputError, PuzzlePart, collection_for_year

EXAMPLE = b"""$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


def _folder_sizes(fs) -> dict[str, int]:
    return {fs.path_of(index): fs.folder_size(index) for index in fs.folder_indices()}


class TranscriptReplayTests(unittest.TestCase):
    def test_example_folder_sizes(self) -> None:
        fs = build_file_system(EXAMPLE)
        self.assertEqual(
            _folder_sizes(fs),
            {"/": 48381165, "/a": 94853, "/a/e": 584, "/d": 24933642},
        )

    def test_all_sizes_are_cached_after_replay(self) -> None:
        fs = build_file_system(EXAMPLE)
        for node in fs.nodes:
            if isinstance(node, FolderNode):
                self.assertIsNotNone(node.size)

    def test_folder_size_equals_sum_of_children(self) -> None:
        fs = build_file_system(EXAMPLE)
        for index in fs.folder_indices():
            folder = fs.folder(index)
            expected = sum(
                fs.folder_size(child) if isinstance(fs.nodes[child], FolderNode) else fs.nodes[child].size
                for child in folder.children
            )
            self.assertEqual(fs.folder_size(index), expected)

    def test_windows_line_breaks_are_accepted(self) -> None:
        fs = build_file_system(EXAMPLE.replace(b"\n", b"\r\n"))
        self.assertEqual(fs.folder_size(), 48381165)

    def test_ls_at_end_of_input_with_no_results(self) -> None:
        fs = build_file_system(b"$ cd /\n$ ls")
        self.assertEqual(fs.folder_size(), 0)

    def test_unknown_command_is_rejected(self) -> None:
        with self.assertRaises(PuzzleInputError):
            build_file_system(b"$ pwd\n")

    def test_bad_file_size_is_rejected(self) -> None:
        with self.assertRaises(PuzzleInputError):
            build_file_system(b"$ ls\nabc file\n")
        with self.assertRaises(PuzzleInputError):
            build_file_system(b"$ ls\n123\n")


class FolderQueryTests(unittest.TestCase):
    def test_sum_of_small_folders(self) -> None:
        self.assertEqual(sum_of_small_folders(build_file_system(EXAMPLE)), 95437)

    def test_smallest_folder_to_free(self) -> None:
        self.assertEqual(smallest_folder_to_free(build_file_system(EXAMPLE)), 24933642)

    def test_nothing_to_free_when_enough_space(self) -> None:
        fs = build_file_system(b"$ cd /\n$ ls\n100 a\n")
        self.assertEqual(smallest_folder_to_free(fs), 0)

    def test_first_minimum_in_pre_order_wins(self) -> None:
        transcript = b"$ cd /\n$ ls\ndir x\ndir y\n$ cd x\n$ ls\n25000000 f\n$ cd ..\n$ cd y\n$ ls\n25000000 g\n"
        fs = build_file_system(transcript)
        self.assertEqual(smallest_folder_to_free(fs), 25000000)

    def test_totals_do_not_depend_on_walk_order(self) -> None:
        nested = (
            b"$ cd /\n$ ls\n50 top\ndir p\ndir q\n"
            b"$ cd p\n$ ls\n30000 a\ndir r\n$ cd r\n$ ls\n70000 b\n"
            b"$ cd /\n$ cd q\n$ ls\n41000000 big\n"
        )
        for transcript in (EXAMPLE, nested):
            fs = build_file_system(transcript)
            post_order_sizes = [fs.folder_size(index) for index in reversed(list(fs.folder_indices()))]

            small_total = sum(size for size in post_order_sizes if size <= SMALL_FOLDER_LIMIT)
            needed = REQUIRED_FREE_SPACE - (TOTAL_DISK_SPACE - fs.folder_size())
            smallest = min(size for size in post_order_sizes if size >= needed)

            with self.subTest(transcript=transcript[:20]):
                self.assertEqual(sum_of_small_folders(fs), small_total)
                self.assertEqual(smallest_folder_to_free(fs), smallest)


def _nested_transcript(depth: int) -> bytes:
    return b"$ cd /\n" + b"$ ls\ndir d\n1 f\n$ cd d\n" * depth


class DeepTranscriptTests(unittest.TestCase):
    def test_deep_nesting_replays_without_exhausting_the_stack(self) -> None:
        depth = 1200
        fs = build_file_system(_nested_transcript(depth))

        self.assertEqual(fs.folder_size(), depth)
        self.assertEqual(fs.folder_size(fs.working_dir), 0)
        # Folder at depth i holds depth - i files below it.
        self.assertEqual(sum_of_small_folders(fs), depth * (depth + 1) // 2)

    def test_deep_nesting_through_the_day_solver(self) -> None:
        depth = 1500
        answer = collection_for_year(2022).solve(7, _nested_transcript(depth), PuzzlePart.PART1)
        self.assertEqual(answer, str(depth * (depth + 1) // 2))


if __name__ == "__main__":
    unittest.main()
