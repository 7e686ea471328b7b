"""
Fixed-boundary integer histogram.

Buckets are defined by ascending boundaries ``b0 < b1 < ... < bn``:

    [0, b0), [b0, b1), ..., [bn-1, bn), [bn, inf)

Only buckets that have been incremented are materialized. Not thread-safe on
its own; owners serialize access.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable
from dataclasses import dataclass

from .config import validate_boundaries


@dataclass(frozen=True)
class Bucket:
    """A single histogram bucket. ``end`` is None for the open-ended last bucket."""

    start: int
    end: int | None
    count: int

    @property
    def label(self) -> str:
        end = "inf" if self.end is None else str(self.end)
        return f"[{self.start},{end})"


class IntHistogram:
    """
    Count integer samples into fixed buckets.

    Example:
        histogram = IntHistogram((1, 10, 25, 39))
        histogram.increment(5)    # lands in [1,10)
        histogram.increment(40)   # lands in [39,inf)
        print(histogram)          # {[1,10)=1, [39,inf)=1}
    """

    def __init__(self, boundaries: Iterable[int]) -> None:
        self._boundaries = tuple(boundaries)
        validate_boundaries(self._boundaries, "boundaries")
        self._counts: dict[int, int] = {}

    @property
    def boundaries(self) -> tuple[int, ...]:
        return self._boundaries

    @property
    def num_buckets(self) -> int:
        return len(self._boundaries) + 1

    def bucket_index(self, value: int) -> int:
        """Index of the bucket holding ``value``; values below zero share bucket 0."""
        return bisect.bisect_right(self._boundaries, value)

    def bucket_start(self, index: int) -> int:
        return 0 if index == 0 else self._boundaries[index - 1]

    def bucket_end(self, index: int) -> int | None:
        return self._boundaries[index] if index < len(self._boundaries) else None

    def increment(self, value: int, count: int = 1) -> None:
        index = self.bucket_index(value)
        self._counts[index] = self._counts.get(index, 0) + count

    def count(self, value: int) -> int:
        """Count held by the bucket that ``value`` falls into."""
        return self._counts.get(self.bucket_index(value), 0)

    def num_non_empty_buckets(self) -> int:
        return sum(1 for c in self._counts.values() if c > 0)

    def buckets(self) -> list[Bucket]:
        """Non-empty buckets in ascending order."""
        return [
            Bucket(
                start=self.bucket_start(index),
                end=self.bucket_end(index),
                count=self._counts[index],
            )
            for index in sorted(self._counts)
            if self._counts[index] > 0
        ]

    def clear(self) -> None:
        self._counts.clear()

    def __str__(self) -> str:
        return "{" + ", ".join(f"{b.label}={b.count}" for b in self.buckets()) + "}"

    def __repr__(self) -> str:
        return f"IntHistogram(boundaries={self._boundaries!r}, buckets={self})"
