"""
Strided map kernels.

Design notes
------------
- `dmap_ndarray` applies a unary transform to `N` elements of `x`, addressed by
  `offset_x + i * stride_x`, and writes to `y` at `offset_y + i * stride_y`,
  for `i` in increasing order. No snapshot of `x` is taken, so aliased
  buffers observe earlier writes.
- Bounds are validated once up-front for every path. Python would otherwise
  wrap negative indices and numba would read past the buffer.
- `dmap` is the offset-free calling convention; negative strides start from
  the far end of the strided window.
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Callable, MutableSequence, Sequence

from strided_map.core import jitted
from strided_map.core.meta import StrideMeta, check_bounds, make_meta
from strided_map.strided_map import Config

logger = logging.getLogger(__name__)


def _access_fields(path: str, meta_x: StrideMeta, meta_y: StrideMeta) -> dict:
    return {
        "path": path,
        "N": meta_x.N,
        "stride_x": meta_x.stride,
        "offset_x": meta_x.offset,
        "stride_y": meta_y.stride,
        "offset_y": meta_y.offset,
    }


def dmap_ndarray(
    N: int,
    x: Sequence[Any],
    stride_x: int,
    offset_x: int,
    y: MutableSequence[Any],
    stride_y: int,
    offset_y: int,
    fcn: Callable[[Any], Any],
) -> MutableSequence[Any]:
    """
    Apply `fcn` to each indexed strided element of `x` and assign to `y`.

    Parameters
    ----------
    N : int
        Number of logical elements. `N <= 0` is a no-op.
    x : Sequence
        Source buffer, read at `offset_x + i * stride_x`.
    stride_x : int
        Signed step through `x`; zero re-reads the same element.
    offset_x : int
        Index of `x` read for logical element 0.
    y : MutableSequence
        Destination buffer, written at `offset_y + i * stride_y`. May be the
        same object as `x`.
    stride_y : int
        Signed step through `y`.
    offset_y : int
        Index of `y` written for logical element 0.
    fcn : Callable
        Unary transform, called exactly once per logical element.

    Returns
    -------
    MutableSequence
        `y` itself.

    Raises
    ------
    TypeError
        If `N`, a stride or an offset is not an integer.
    IndexError
        If any visited index lies outside its buffer. Raised before any
        element is read or written.

    Notes
    -----
    Exceptions raised by `fcn` propagate unchanged; elements before the
    failing one have already been written.
    """
    N = operator.index(N)
    if N <= 0:
        return y

    meta_x = make_meta(N, stride_x, offset_x)
    meta_y = make_meta(N, stride_y, offset_y)
    check_bounds(meta_x, len(x), "x")
    check_bounds(meta_y, len(y), "y")

    if Config().use_jit and jitted.supports(x, y, fcn):
        logger.debug(
            "dmap_ndarray: compiled path, N=%d",
            N,
            extra=_access_fields("compiled", meta_x, meta_y),
        )
        return jitted.dmap_ndarray(
            meta_x.N,
            x,
            meta_x.stride,
            meta_x.offset,
            y,
            meta_y.stride,
            meta_y.offset,
            fcn,
        )

    logger.debug(
        "dmap_ndarray: python path, N=%d",
        N,
        extra=_access_fields("python", meta_x, meta_y),
    )
    ix = meta_x.offset
    iy = meta_y.offset
    for _ in range(meta_x.N):
        y[iy] = fcn(x[ix])
        ix += meta_x.stride
        iy += meta_y.stride
    return y


def dmap(
    N: int,
    x: Sequence[Any],
    stride_x: int,
    y: MutableSequence[Any],
    stride_y: int,
    fcn: Callable[[Any], Any],
) -> MutableSequence[Any]:
    """
    Apply `fcn` to each strided element of `x` and assign to `y`.

    Offsets are derived from the strides: a negative stride starts at the
    last of the `N` strided elements and walks back to the first.
    """
    N = operator.index(N)
    if N <= 0:
        return y
    return dmap_ndarray(
        N,
        x,
        stride_x,
        make_meta(N, stride_x).offset,
        y,
        stride_y,
        make_meta(N, stride_y).offset,
        fcn,
    )
