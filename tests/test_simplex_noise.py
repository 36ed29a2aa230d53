import numpy as np
import pytest

from noisekit import tables
from noisekit.simplex_noise import (
    eval2, eval3, eval4,
    eval2_array, eval3_array, eval4_array,
    gradient2, gradient3, gradient4,
    flow2,
)
from noisekit.fractal import fbm3

SEEDS = [0, 1, 12345, -987654, 2**31 - 1]


def _random_points(dim, count, low=-100.0, high=100.0, seed=7):
    rng = np.random.default_rng(seed)
    return rng.uniform(low, high, size=(count, dim))


def _central_difference(func, point, h=1e-4):
    grad = np.zeros(len(point))
    for axis in range(len(point)):
        hi = np.array(point, dtype=float)
        lo = np.array(point, dtype=float)
        hi[axis] += h
        lo[axis] -= h
        grad[axis] = (func(*hi) - func(*lo)) / (2.0 * h)
    return grad


def test_scenario_self_consistency():
    first = eval2(0.37, 1.91, 12345)
    second = eval2(0.37, 1.91, 12345)
    assert first == second
    assert isinstance(first, float)


@pytest.mark.parametrize("seed", SEEDS)
def test_evaluators_are_deterministic(seed):
    for x, y, z, w in _random_points(4, 50, seed=seed & 0xff):
        assert eval2(x, y, seed) == eval2(x, y, seed)
        assert eval3(x, y, z, seed) == eval3(x, y, z, seed)
        assert eval4(x, y, z, w, seed) == eval4(x, y, z, w, seed)


@pytest.mark.parametrize("seed", SEEDS)
def test_lattice_vertex_is_zero(seed):
    assert abs(eval2(0.0, 0.0, seed)) <= 1e-9
    assert abs(eval3(0.0, 0.0, 0.0, seed)) <= 1e-9
    assert abs(eval4(0.0, 0.0, 0.0, 0.0, seed)) <= 1e-9


def test_seed_is_consumed_as_32_bits():
    assert eval3(1.3, -2.2, 0.7, 42) == eval3(1.3, -2.2, 0.7, 42 + 2**32)


def test_output_is_bounded():
    count = 100_000
    for dim, evaluate in ((2, eval2_array), (3, eval3_array), (4, eval4_array)):
        pts = _random_points(dim, count, seed=dim)
        values = evaluate(*pts.T, 4242)
        assert np.all(np.isfinite(values))
        inside = np.mean(np.abs(values) <= 1.2)
        assert inside >= 0.999, f"{dim}D: only {inside:.4%} of samples in [-1.2, 1.2]"
        # the field is not degenerate
        assert values.std() > 0.05


def test_seed_decorrelation():
    pts = _random_points(3, 20_000, seed=11)
    a = eval3_array(*pts.T, 1001)
    b = eval3_array(*pts.T, 2002)
    r = np.corrcoef(a, b)[0, 1]
    assert abs(r) < 0.05


@pytest.mark.parametrize("dim", [2, 3, 4])
def test_derivative_matches_finite_difference(dim):
    evaluate = {2: eval2, 3: eval3, 4: eval4}[dim]
    seed = 314159
    for point in _random_points(dim, 40, low=-10.0, high=10.0, seed=dim + 20):
        deriv = np.zeros(dim)
        value = evaluate(*point, seed, deriv)
        assert value == evaluate(*point, seed)

        numeric = _central_difference(lambda *p: evaluate(*p, seed), point)
        np.testing.assert_allclose(deriv, numeric, rtol=1e-2, atol=1e-4)


def test_derivative_buffer_is_overwritten():
    deriv = np.full(3, 123.0)
    eval3(0.5, 0.25, -0.75, 9, deriv)
    fresh = np.zeros(3)
    eval3(0.5, 0.25, -0.75, 9, fresh)
    np.testing.assert_array_equal(deriv, fresh)


def test_derivative_accepts_lists():
    deriv = [0.0, 0.0]
    eval2(1.1, 2.2, 5, deriv)
    expected = np.zeros(2)
    eval2(1.1, 2.2, 5, expected)
    assert deriv == list(expected)


@pytest.mark.parametrize("evaluate, coords", [
    (eval2, (0.1, 0.2)),
    (eval3, (0.1, 0.2, 0.3)),
    (eval4, (0.1, 0.2, 0.3, 0.4)),
])
def test_wrong_derivative_size_raises(evaluate, coords):
    with pytest.raises(ValueError):
        evaluate(*coords, 1, np.zeros(len(coords) + 1))


def test_field_is_continuous():
    # C1 blending: tiny moves give tiny changes everywhere, across cell edges too
    pts = _random_points(3, 500, low=-5.0, high=5.0, seed=99)
    for x, y, z in pts:
        assert abs(eval3(x, y, z, 3) - eval3(x + 1e-7, y, z, 3)) < 1e-5


def test_array_matches_scalar():
    xx, yy = np.meshgrid(np.linspace(-3, 3, 17), np.linspace(-2, 5, 9))
    grid = eval2_array(xx, yy, 77)
    assert grid.shape == xx.shape
    expected = np.array([eval2(x, y, 77) for x, y in zip(xx.ravel(), yy.ravel())])
    np.testing.assert_allclose(grid.ravel(), expected, rtol=1e-12, atol=1e-12)

    zz = np.full_like(xx, 0.5)
    grid3 = eval3_array(xx, yy, zz, 77)
    assert grid3[3, 4] == pytest.approx(eval3(xx[3, 4], yy[3, 4], 0.5, 77), abs=1e-12)

    grid4 = eval4_array(xx, yy, 0.5, -1.5, 77)
    assert grid4.shape == xx.shape
    assert grid4[2, 6] == pytest.approx(eval4(xx[2, 6], yy[2, 6], 0.5, -1.5, 77), abs=1e-12)


def test_gradients_come_from_tables():
    grads2 = {tuple(g) for g in tables.GRAD_2}
    grads3 = {tuple(g) for g in tables.GRAD_3}
    grads4 = {tuple(g) for g in tables.GRAD_4}
    for i in range(-5, 5):
        for j in range(-5, 5):
            assert tuple(gradient2(i, j, 8)) in grads2
            assert tuple(gradient3(i, j, i - j, 8)) in grads3
            assert tuple(gradient4(i, j, i + j, i * j, 8)) in grads4


def test_gradients_differ_between_seeds():
    cells = [(i, j) for i in range(8) for j in range(8)]
    a = [tuple(gradient2(i, j, 1)) for i, j in cells]
    b = [tuple(gradient2(i, j, 2)) for i, j in cells]
    assert a != b


# (x, y, z, w, seed) -> value followed by its derivative
REFERENCE = [
    ((0.37, -1.82, 2.5, 0.91, 0), {
        "eval2": [0.44026062869326660, 2.5612939619895014, -0.098696667166182639],
        "eval3": [-0.46180393218419563, -1.4376384027885545, -1.4498255806664773, -1.5821289104032812],
        "eval4": [-0.26383216740733045, 0.30266548384334152, -0.78193230245722323,
                  1.0305441130229616, -2.3771486913030295],
        "flow2": [-0.11040973927656506, 2.8177123888612132, -0.55058865921696376],
        "fbm3": [-0.25327171185423319, -0.61829907270275208, -0.72635234318403874, -0.32524076622173392],
    }),
    ((12.25, 7.5, -3.75, 1.125, -987654), {
        "eval2": [-0.49222114729114863, -2.7069801059520833, -1.8626648555719865],
        "eval3": [-0.67251699942129628, -2.2455150462962963, -0.0096330054012346220, -2.2125168788580245],
        "eval4": [0.084776153300354623, 1.4018916318515269, 0.57930916478285033,
                  0.69976190321834930, 0.92378226039134026],
        "flow2": [-0.19297386640150782, -1.4920674267023226, 0.71165745784361212],
        "fbm3": [-0.43788329073431242, -1.1148666570216037, 0.61538507908950291, -0.86184654706790664],
    }),
    ((-4.6, 0.05, 9.3, -2.2, 2147483647), {
        "eval2": [-0.14411105705079194, -3.6986987940193043, 2.4356935644947297],
        "eval3": [0.42224710184747982, -2.6201724176150956, 0.67558095154964504, 0.12473546608860496],
        "eval4": [-0.079581752240296011, 0.81061116921520315, -0.14728281105992674,
                  0.0047854542970599528, -0.73679882315452083],
        "flow2": [0.088216076720537884, -3.5698604420985243, 2.9428452736771558],
        "fbm3": [0.18266343774678612, -1.5717488641984909, 0.63782352990547908, -0.27121489384356462],
    }),
    ((1.1, 2.2, 3.3, 4.4, 42), {
        "eval2": [-0.26819890279665387, -0.82422808897038724, 1.6854016377654633],
        "eval3": [0.47007964799999991, 0.19630715999999915, -1.7469036800000008, -1.8030655599999970],
        "eval4": [-0.16852325996109849, -0.37907129891869407, -1.6639191304644074,
                  0.35016443619727761, -0.083681448301930070],
        "flow2": [-0.43024060941767100, 0.083899276078034823, 3.7900138079183248],
        "fbm3": [0.35836654924999989, 0.38964299861110996, -0.69014858680555680, -0.73482363763888292],
    }),
]


@pytest.mark.parametrize("point, expected", REFERENCE)
def test_reference_values(point, expected):
    x, y, z, w, seed = point
    calls = {
        "eval2": (2, lambda d: eval2(x, y, seed, d)),
        "eval3": (3, lambda d: eval3(x, y, z, seed, d)),
        "eval4": (4, lambda d: eval4(x, y, z, w, seed, d)),
        "flow2": (2, lambda d: flow2(x, y, 0.7, seed, d)),
        "fbm3": (3, lambda d: fbm3((x, y, z), seed, 5, 2.0, 0.5, d)),
    }
    for name, (size, call) in calls.items():
        deriv = np.zeros(size)
        value = call(deriv)
        np.testing.assert_allclose([value, *deriv], expected[name], rtol=1e-10, atol=1e-12,
                                   err_msg=name)
