"""
Core strided map kernels and their metadata helpers.

The in-place kernels mutate caller-owned buffers; `functional` offers the
same semantics for immutable JAX arrays and `jitted` the numba-compiled loop.
"""

from strided_map.core import functional, jitted, kernels, meta

__all__ = ["kernels", "functional", "jitted", "meta"]
