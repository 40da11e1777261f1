"""Top-level strided map helpers."""

from strided_map import core
from strided_map.core.kernels import dmap, dmap_ndarray
from strided_map.core.meta import StrideMeta, make_meta, stride2offset
from strided_map.strided_map import Config, Session

__all__ = [
    "core",
    "dmap",
    "dmap_ndarray",
    "make_meta",
    "stride2offset",
    "StrideMeta",
    "Config",
    "Session",
]
