import numpy as np
import pytest

import noisekit
from noisekit import FbmParams, SimplexNoise


def test_default_seed_is_used():
    assert SimplexNoise().seed == noisekit.DEFAULT_SEED


def test_seed_is_wrapped():
    assert SimplexNoise(2**32 + 3).seed == 3


def test_scalar_dispatch():
    gen = SimplexNoise(42)
    assert gen.noise_2d(0.5, 1.5) == noisekit.eval2(0.5, 1.5, 42)
    assert gen.noise_3d(0.5, 1.5, 2.5) == noisekit.eval3(0.5, 1.5, 2.5, 42)
    assert gen.noise_4d(0.5, 1.5, 2.5, 3.5) == noisekit.eval4(0.5, 1.5, 2.5, 3.5, 42)
    assert gen.flow_2d(0.5, 1.5, 0.3) == noisekit.flow2(0.5, 1.5, 0.3, 42)
    assert gen.flow_3d(0.5, 1.5, 2.5, 0.3) == noisekit.flow3(0.5, 1.5, 2.5, 0.3, 42)


def test_array_dispatch():
    gen = SimplexNoise(42)
    xx, yy = np.meshgrid(np.linspace(0, 4, 8), np.linspace(0, 2, 5))
    out = gen.noise_2d(xx, yy)
    assert isinstance(out, np.ndarray)
    assert out.shape == (5, 8)
    np.testing.assert_allclose(out, noisekit.eval2_array(xx, yy, 42))

    out3 = gen.noise_3d(xx, yy, 1.0)
    assert out3.shape == (5, 8)
    out4 = gen.noise_4d(xx, yy, 1.0, 2.0)
    assert out4.shape == (5, 8)
    assert gen.flow_2d(xx, yy, 1.0).shape == (5, 8)
    assert gen.flow_3d(xx, yy, 0.0, 1.0).shape == (5, 8)


def test_fbm_uses_params():
    params = FbmParams(octaves=3, lacunarity=2.5, gain=0.4)
    gen = SimplexNoise(9, params)
    deriv = np.zeros(2)
    value = gen.fbm_2d(1.0, 2.0, deriv)
    expected_deriv = np.zeros(2)
    assert value == noisekit.fbm2((1.0, 2.0), 9, 3, 2.5, 0.4, expected_deriv)
    np.testing.assert_array_equal(deriv, expected_deriv)
    assert gen.fbm_3d(1.0, 2.0, 3.0) == noisekit.fbm3((1.0, 2.0, 3.0), 9, 3, 2.5, 0.4)
    assert gen.fbm_4d(1.0, 2.0, 3.0, 4.0) == noisekit.fbm4((1.0, 2.0, 3.0, 4.0), 9, 3, 2.5, 0.4)


def test_fbm_rejects_deriv_with_arrays():
    gen = SimplexNoise(9)
    xx, yy = np.meshgrid(np.arange(3.0), np.arange(2.0))
    with pytest.raises(ValueError):
        gen.fbm_2d(xx, yy, np.zeros(2))
    with pytest.raises(ValueError):
        gen.fbm_3d(xx, yy, 0.5, np.zeros(3))


def test_fbm_on_grids():
    gen = SimplexNoise(9, FbmParams(octaves=5))
    xx, yy = np.meshgrid(np.linspace(0, 4, 6), np.linspace(0, 2, 3))
    grid = gen.fbm_2d(xx, yy)
    assert grid.shape == (3, 6)
    assert grid[1, 2] == pytest.approx(gen.fbm_2d(xx[1, 2], yy[1, 2]), abs=1e-12)
    assert gen.fbm_3d(xx, yy, 0.5).shape == (3, 6)


def test_vector_noise():
    gen = SimplexNoise(5)
    np.testing.assert_array_equal(gen.vector_2d((1.0, 2.0)), noisekit.noise2((1.0, 2.0), 5))
    target = np.zeros(3)
    assert gen.vector_3d((1.0, 2.0, 3.0), target) is target
    assert gen.vector_4d((1.0, 2.0, 3.0, 4.0)).shape == (4,)


def test_repr():
    assert repr(SimplexNoise(1)).startswith("SimplexNoise(seed=1")
