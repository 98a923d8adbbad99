"""Replay a shell transcript of ``cd``/``ls`` commands into a ``FileSystem``."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..line_pipeline import decode_line, parse_int, read_lines, split_once
from ..puzzle import PuzzleInputError
from .tree import ROOT_INDEX, FileSystem

logger = logging.getLogger(__name__)

CD_PREFIX = b"$ cd "
LS_COMMAND = b"$ ls"
DIR_PREFIX = b"dir "


def build_file_system(data: Iterable[int]) -> FileSystem:
    """Rebuild the directory tree described by a transcript.

    All folder sizes are computed once after the replay so later queries hit
    the cache.
    """
    lines = list(read_lines(data))
    fs = FileSystem()

    position = 0
    commands = 0
    while position < len(lines):
        line = lines[position]
        position += 1
        commands += 1
        if line.startswith(CD_PREFIX):
            fs.cd(decode_line(line[len(CD_PREFIX):]))
        elif line == LS_COMMAND:
            position = _replay_listing(fs, lines, position)
        else:
            raise PuzzleInputError(f"unknown command: {line!r}")

    fs.folder_size(ROOT_INDEX)
    logger.debug(f"Replayed {commands} commands into {len(fs.nodes)} nodes")
    return fs


def _replay_listing(fs: FileSystem, lines: list[bytes], position: int) -> int:
    """Apply ``ls`` result lines starting at ``position``.

    Returns the index of the first line that is not part of the listing.
    """
    while position < len(lines):
        line = lines[position]
        if line.startswith(b"$"):
            break

        if line.startswith(DIR_PREFIX):
            fs.find_or_create_subdirectory(decode_line(line[len(DIR_PREFIX):]))
        else:
            size_field, name = split_once(b" ", line)
            fs.add_file(decode_line(name), parse_int(size_field))
        position += 1
    return position
