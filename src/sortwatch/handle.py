"""
Sequence handle used by every sorting algorithm.

The engine never owns storage. It works through any mutable, indexable,
fixed-length sequence (list, array.array, 1-D numpy.ndarray, ...) using only:
    len(seq), seq[i], seq[i] = v

A `Range` is a half-open window [first, last) into such a sequence. It is used
both as the region to sort and as the region reported to an observer.

Public API (stable):
    Range(first, last)
    resolve_range(seq, first=0, last=None) -> Range
    swap(seq, i, j) -> None
"""

from __future__ import annotations

from typing import Any, Iterator, NamedTuple, Optional

__all__ = ["Range", "resolve_range", "swap"]


class Range(NamedTuple):
    """Half-open window [first, last) of sequence positions."""

    first: int
    last: int

    @property
    def length(self) -> int:
        return self.last - self.first

    def indices(self) -> Iterator[int]:
        return iter(range(self.first, self.last))


def resolve_range(seq: Any, first: int = 0, last: Optional[int] = None) -> Range:
    """
    Validate [first, last) against `seq` and return it as a `Range`.

    Parameters
    ----------
    seq : sequence
        Anything supporting len().
    first : int
        Inclusive start position (default 0).
    last : int | None
        Exclusive end position; None means len(seq).

    Raises
    ------
    ValueError
        If first > last, or the window reaches outside [0, len(seq)].
    """
    n = len(seq)
    if last is None:
        last = n
    if first > last:
        raise ValueError(f"invalid range: first > last ({first} > {last})")
    if first < 0 or last > n:
        raise ValueError(
            f"range [{first}, {last}) outside sequence of length {n}"
        )
    return Range(first, last)


def swap(seq: Any, i: int, j: int) -> None:
    # Both reads happen before either write, so numpy scalars are copied too.
    seq[i], seq[j] = seq[j], seq[i]
