import numpy as np
import pytest

from quadconv import Grid1D, gen_uniform_grid, refined_count


def test_gen_uniform_grid_basic():
    a, b, n = -5.5312, 3.32, 39
    step = abs(b - a) / (n - 1)
    x = gen_uniform_grid(step, n, a, b)

    assert x.shape == (n,)
    assert x[0] == a
    # 最后一个点必须精确等于 b
    assert x[-1] == b
    assert np.allclose(np.diff(x), step)


def test_gen_uniform_grid_snaps_last_node():
    # 故意给一个略偏的步长，最后一点仍然是 b
    x = gen_uniform_grid(0.1000001, 11, 0.0, 1.0)
    assert x[-1] == 1.0
    assert np.isclose(x[5], 0.5000005)


def test_gen_uniform_grid_two_nodes():
    x = gen_uniform_grid(2.0, 2, -1.0, 1.0)
    assert list(x) == [-1.0, 1.0]


@pytest.mark.parametrize("n", [0, 1])
def test_gen_uniform_grid_rejects_too_few_nodes(n):
    with pytest.raises(ValueError):
        gen_uniform_grid(0.1, n, 0.0, 1.0)


@pytest.mark.parametrize("a, b", [(1.0, 0.0), (1.0, 1.0), (1.0, 1.0 + 1e-17)])
def test_gen_uniform_grid_rejects_bad_interval(a, b):
    with pytest.raises(ValueError):
        gen_uniform_grid(0.1, 5, a, b)


def test_grid1d_uniform():
    g = Grid1D.uniform(0.0, 2.0, 11)
    assert g.count_nodes == 11
    assert np.isclose(g.step, 0.2)

    x = g.x
    assert x.shape == (11,)
    assert x[0] == 0.0
    assert x[-1] == 2.0
    assert np.isclose(g.step * (g.count_nodes - 1), g.b - g.a)


def test_grid1d_is_read_only():
    g = Grid1D.uniform(0.0, 1.0, 5)
    with pytest.raises(ValueError):
        g.x[0] = 42.0


def test_grid1d_rejects_degenerate():
    with pytest.raises(ValueError):
        Grid1D(step=0.1, count_nodes=1, a=0.0, b=1.0)
    with pytest.raises(ValueError):
        Grid1D(step=0.1, count_nodes=5, a=2.0, b=1.0)
    with pytest.raises(ValueError):
        Grid1D.uniform(3.0, 3.0, 5)


def test_grid1d_rejects_inconsistent_step():
    # 0.1 * 4 != 1.0：最后一段会被拉长，不是均匀网格
    with pytest.raises(ValueError):
        Grid1D(step=0.1, count_nodes=5, a=0.0, b=1.0)
    with pytest.raises(ValueError):
        Grid1D(step=0.0, count_nodes=5, a=0.0, b=1.0)
    with pytest.raises(ValueError):
        Grid1D(step=-0.25, count_nodes=5, a=0.0, b=1.0)

    g = Grid1D(step=0.25, count_nodes=5, a=0.0, b=1.0)
    assert np.allclose(np.diff(g.x), 0.25)


def test_refined_count_law():
    # ratio = 2: 2n - 1
    assert refined_count(39, 2) == 77
    assert refined_count(5, 2) == 9
    # 一般情况：(n-1)*ratio + 1，粗网格每个点都落在细网格上
    assert refined_count(5, 3) == 13
    assert refined_count(5, 1) == 5


def test_grid1d_refined_keeps_coarse_nodes():
    g = Grid1D.uniform(-1.0, 2.0, 7)
    for ratio in (2, 3, 4):
        fine = g.refined(ratio)
        assert fine.count_nodes == refined_count(7, ratio)
        assert np.allclose(fine.x[::ratio], g.x)
        assert fine.x[-1] == g.x[-1]
