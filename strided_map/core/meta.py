"""
Metadata helpers describing one strided access pattern.

`StrideMeta` bundles the element count, stride and starting offset of a
buffer so the physical index sequence and its extremes can be computed once
and validated before any kernel touches the buffer.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True)
class StrideMeta:
    N: int
    stride: int
    offset: int

    def indices(self) -> Iterator[int]:
        """
        Physical indices in logical order, `offset + i * stride` for
        `i` in `[0, N)`.
        """
        idx = self.offset
        for _ in range(self.N):
            yield idx
            idx += self.stride

    def bounds(self) -> Optional[Tuple[int, int]]:
        """
        Smallest and largest physical index visited, or None if nothing is.
        """
        if self.N <= 0:
            return None
        first = self.offset
        last = self.offset + (self.N - 1) * self.stride
        return min(first, last), max(first, last)


def stride2offset(N: int, stride: int) -> int:
    """
    Starting offset for a buffer addressed without an explicit offset.

    A negative stride walks the first `N` strided elements backwards, so
    logical index 0 sits at the far end of that window.

    Parameters
    ----------
    N : int
        Number of logical elements.
    stride : int
        Signed step between consecutive elements.

    Returns
    -------
    int
        `(1 - N) * stride` for negative strides, otherwise 0.
    """
    if stride < 0:
        return (1 - N) * stride
    return 0


def make_meta(N: int, stride: int, offset: Optional[int] = None) -> StrideMeta:
    if offset is None:
        offset = stride2offset(N, stride)
    return StrideMeta(
        N=operator.index(N),
        stride=operator.index(stride),
        offset=operator.index(offset),
    )


def check_bounds(meta: StrideMeta, length: int, name: str) -> None:
    """
    Validate that every physical index of `meta` lies in `[0, length)`.

    The index sequence is an arithmetic progression, so checking its two
    extremes covers all of it.

    Raises
    ------
    IndexError
        If any visited index falls outside the buffer.
    """
    extremes = meta.bounds()
    if extremes is None:
        return
    low, high = extremes
    if low < 0:
        raise IndexError(
            f"Index {low} out of bounds for `{name}` of length {length} "
            f"(N={meta.N}, stride={meta.stride}, offset={meta.offset})"
        )
    if high >= length:
        raise IndexError(
            f"Index {high} out of bounds for `{name}` of length {length} "
            f"(N={meta.N}, stride={meta.stride}, offset={meta.offset})"
        )
