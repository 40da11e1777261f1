"""
Numba-compiled rendition of the strided map loop.

Only used for `numpy.ndarray` buffers together with a transform that is itself
a numba dispatcher (e.g. decorated with `@njit`). Bounds are validated by the
caller before entering compiled code, since numba does not check indices.
"""

from __future__ import annotations

import operator
from typing import Any

import numpy as np
from numba import njit
from numba.core.registry import CPUDispatcher


@njit
def _dmap_ndarray_loop(N, x, stride_x, offset_x, y, stride_y, offset_y, fcn):
    ix = offset_x
    iy = offset_y
    for _ in range(N):
        y[iy] = fcn(x[ix])
        ix += stride_x
        iy += stride_y


def is_compiled(fcn: Any) -> bool:
    return isinstance(fcn, CPUDispatcher)


def supports(x: Any, y: Any, fcn: Any) -> bool:
    """
    True if the buffers and transform can be handed to the compiled loop.
    """
    return (
        isinstance(x, np.ndarray)
        and isinstance(y, np.ndarray)
        and x.ndim == 1
        and y.ndim == 1
        and y.flags.writeable
        and is_compiled(fcn)
    )


def dmap_ndarray(
    N: int,
    x: np.ndarray,
    stride_x: int,
    offset_x: int,
    y: np.ndarray,
    stride_y: int,
    offset_y: int,
    fcn: CPUDispatcher,
) -> np.ndarray:
    """
    Run the compiled loop and return `y`.

    Parameters
    ----------
    N : int
        Number of logical elements; must be positive.
    x, y : np.ndarray
        One-dimensional source and destination buffers, which may alias.
    stride_x, offset_x, stride_y, offset_y : int
        Access pattern of each buffer.
    fcn : numba dispatcher
        Compiled unary transform.

    Returns
    -------
    np.ndarray
        The destination buffer `y` itself.
    """
    _dmap_ndarray_loop(
        N,
        x,
        operator.index(stride_x),
        operator.index(offset_x),
        y,
        operator.index(stride_y),
        operator.index(offset_y),
        fcn,
    )
    return y
