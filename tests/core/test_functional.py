import jax
import jax.numpy as jnp
import numpy as np
import pytest

from strided_map.core import functional, kernels


def test_functional_matches_in_place_kernel():
    x = jnp.array([-1.0, -2.0, -3.0, -4.0, -5.0, -6.0])
    y = jnp.zeros(6)

    out = functional.dmap_ndarray(3, x, 2, 1, y, -1, 5, jnp.abs)

    expected = kernels.dmap_ndarray(3, np.asarray(x), 2, 1, np.zeros(6), -1, 5, abs)
    assert jnp.allclose(out, expected)
    # Input arrays are untouched.
    assert jnp.allclose(y, jnp.zeros(6))


def test_functional_keeps_float64():
    x = jnp.array([-1.0, -2.0], dtype=jnp.float64)
    y = jnp.zeros(2, dtype=jnp.float64)

    out = functional.dmap_ndarray(2, x, 1, 0, y, 1, 0, jnp.abs)

    assert out.dtype == jnp.float64


@pytest.mark.parametrize("N", [0, -1])
def test_functional_non_positive_n_returns_y(N):
    y = jnp.zeros(3)
    out = functional.dmap_ndarray(N, jnp.ones(3), 1, 0, y, 1, 0, jnp.abs)
    assert out is y


def test_functional_zero_stride_keeps_last_write():
    x = jnp.array([-1.0, -2.0, -3.0, -4.0])
    y = jnp.zeros(3)

    out = functional.dmap_ndarray(4, x, 1, 0, y, 0, 1, jnp.abs)

    assert jnp.allclose(out, jnp.array([0.0, 4.0, 0.0]))


def test_functional_aliased_reads_see_earlier_writes():
    buf = jnp.array([1.0, 0.0, 0.0, 0.0, 0.0])

    out = functional.dmap_ndarray(4, buf, 1, 0, buf, 1, 1, lambda v: v + 1.0, aliased=True)

    assert jnp.allclose(out, jnp.array([1.0, 2.0, 3.0, 4.0, 5.0]))


def test_functional_out_of_bounds_raises():
    x = jnp.array([-1.0, -2.0, -3.0])
    y = jnp.zeros(3)
    with pytest.raises(IndexError):
        functional.dmap_ndarray(3, x, 1, 1, y, 1, 0, jnp.abs)
    with pytest.raises(IndexError):
        functional.dmap_ndarray(3, x, 1, 0, y, -1, 1, jnp.abs)


def test_functional_under_jit():
    @jax.jit
    def run(x, y):
        return functional.dmap_ndarray(3, x, -2, 4, y, -1, 3, jnp.abs)

    out = run(jnp.array([-1.0, -2.0, -3.0, -4.0, -5.0]), jnp.zeros(5))

    assert jnp.allclose(out, jnp.array([0.0, 1.0, 3.0, 5.0, 0.0]))


def test_functional_non_integer_stride_raises_type_error():
    with pytest.raises(TypeError):
        functional.dmap_ndarray(2, jnp.ones(4), 1.5, 0, jnp.zeros(4), 1, 0, jnp.abs)
