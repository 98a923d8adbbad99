"""Inclusive stepped ranges over fixed-width unsigned integers.

``stepped_range(start, stop, step)`` walks from ``start`` towards ``stop`` in
either direction and includes the last value reachable by whole steps.
Descending ranges add the two's-complement negation of ``step`` with
wraparound, so one addition primitive serves both directions and full-width
walks such as ``0 -> MAX`` never step outside the type.
"""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_BITS = 64


class SteppedRange:
    """Validated range state; build instances through ``stepped_range``."""

    __slots__ = ("start", "stop", "step", "bits", "descending", "_increment", "_mask", "_count")

    def __init__(self, start: int, stop: int, step: int, bits: int) -> None:
        self.bits = bits
        self._mask = (1 << bits) - 1
        self.start = start
        self.step = step
        self.descending = start > stop

        step_count = abs(start - stop) // step
        normalized_distance = step_count * step
        if self.descending:
            self.stop = start - normalized_distance
            self._increment = (-step) & self._mask
        else:
            self.stop = start + normalized_distance
            self._increment = step
        self._count = step_count + 1

    def __iter__(self) -> Iterator[int]:
        current = self.start
        while True:
            yield current
            # The normalized stop is always hit exactly.
            if current == self.stop:
                return
            current = (current + self._increment) & self._mask

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"SteppedRange(start={self.start}, stop={self.stop}, step={self.step}, bits={self.bits})"


def max_value(bits: int = DEFAULT_BITS) -> int:
    """Largest value of the unsigned ``bits``-wide integer type."""
    return (1 << bits) - 1


def stepped_range(start: int, stop: int, step: int, *, bits: int = DEFAULT_BITS) -> SteppedRange | None:
    """Build an inclusive range from ``start`` towards ``stop``.

    Returns ``None`` when the arguments cannot describe a range: a step that is
    not strictly positive, or any value outside ``0..2**bits - 1``. ``stop``
    is only reached when ``step`` divides the span; otherwise the range ends
    at the last value short of it.
    """
    if bits <= 0:
        return None
    limit = max_value(bits)
    if step <= 0 or step > limit:
        return None
    if not (0 <= start <= limit and 0 <= stop <= limit):
        return None
    return SteppedRange(start, stop, step, bits)


def inclusive_indices(start: int, stop: int) -> SteppedRange:
    """Unit-step range for index arithmetic where bounds are known valid."""
    indices = stepped_range(start, stop, 1)
    if indices is None:
        raise ValueError(f"invalid index range {start}..{stop}")
    return indices
