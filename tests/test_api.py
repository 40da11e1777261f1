import inspect

import numpy as np

import strided_map
from strided_map import dmap, dmap_ndarray


def test_main_exports():
    assert callable(strided_map.dmap)
    assert callable(strided_map.dmap_ndarray)
    assert strided_map.dmap_ndarray is strided_map.core.kernels.dmap_ndarray


def test_dmap_ndarray_has_arity_of_8():
    assert len(inspect.signature(dmap_ndarray).parameters) == 8


def test_dmap_has_arity_of_6():
    assert len(inspect.signature(dmap).parameters) == 6


def test_documented_scenarios():
    x = np.array([-1.0, -2.0, -3.0, -4.0, -5.0])

    y = dmap_ndarray(5, x, 1, 0, np.zeros(5), 1, 0, abs)
    assert np.array_equal(y, np.array([1.0, 2.0, 3.0, 4.0, 5.0]))

    y = dmap_ndarray(3, x, 2, 0, np.zeros(5), 1, 0, abs)
    assert np.array_equal(y, np.array([1.0, 3.0, 5.0, 0.0, 0.0]))

    y = dmap_ndarray(3, x, -2, 4, np.zeros(5), -1, 3, abs)
    assert np.array_equal(y, np.array([0.0, 1.0, 3.0, 5.0, 0.0]))

    for N in (-1, 0):
        y = np.zeros(5)
        assert dmap(N, x, 1, y, 1, abs) is y
        assert np.array_equal(y, np.zeros(5))
