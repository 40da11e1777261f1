"""
Strided map over immutable JAX arrays.

JAX arrays cannot be written in place, so this variant returns a new array
holding exactly what the in-place kernel would leave in `y`. The loop is a
`jax.lax.fori_loop` rather than a vectorized scatter: duplicate write indices
(zero stride) and aliased reads must resolve in logical order.
"""

from __future__ import annotations

import operator
from typing import Callable

import jax
import jax.numpy as jnp

from strided_map.core.meta import check_bounds, make_meta

jax.config.update("jax_enable_x64", True)


def dmap_ndarray(
    N: int,
    x: jnp.ndarray,
    stride_x: int,
    offset_x: int,
    y: jnp.ndarray,
    stride_y: int,
    offset_y: int,
    fcn: Callable[[jnp.ndarray], jnp.ndarray],
    *,
    aliased: bool = False,
) -> jnp.ndarray:
    """
    Functional counterpart of `strided_map.core.kernels.dmap_ndarray`.

    Parameters
    ----------
    N : int
        Number of logical elements. `N <= 0` returns `y` unchanged.
    x : jnp.ndarray
        Source buffer. Ignored for reads when `aliased` is True.
    stride_x, offset_x : int
        Access pattern of the source.
    y : jnp.ndarray
        Destination buffer; not modified.
    stride_y, offset_y : int
        Access pattern of the destination.
    fcn : Callable
        Traceable unary transform, e.g. `jnp.abs`.
    aliased : bool
        Treat source and destination as the same buffer, so reads observe
        values written at earlier logical indices.

    Returns
    -------
    jnp.ndarray
        Updated copy of `y`, or `y` itself when `N <= 0`.

    Raises
    ------
    IndexError
        If any visited index lies outside its buffer. JAX would clamp such
        an index instead of failing.
    """
    N = operator.index(N)
    if N <= 0:
        return y

    meta_x = make_meta(N, stride_x, offset_x)
    meta_y = make_meta(N, stride_y, offset_y)
    x = jnp.asarray(x)
    y = jnp.asarray(y)
    check_bounds(meta_x, y.shape[0] if aliased else x.shape[0], "x")
    check_bounds(meta_y, y.shape[0], "y")

    def body(i, out):
        src = out if aliased else x
        value = fcn(src[meta_x.offset + i * meta_x.stride])
        return out.at[meta_y.offset + i * meta_y.stride].set(value)

    return jax.lax.fori_loop(0, meta_x.N, body, y)
