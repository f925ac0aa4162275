import numpy as np
import pytest

from quadconv import (
    FunctionSampler,
    QuadratureRule,
    RULES,
    STENCILS,
    calculate_errors,
    calculate_numerical_integrals,
    integrate,
)


def _reference(f, count, step):
    """逐条公式、按原始下标条件手算，用来对照一遍扫描的结果。"""
    last = count - 1
    rect = trap = simp = nc = gauss = 0.0
    for i in range(count):
        if i % 2 == 1 and i != last:
            rect += 2 * step * f[i]
        if i < last:
            trap += step / 2 * (f[i] + f[i + 1])
        if i % 2 == 0 and i < count - 2:
            simp += step / 3 * (f[i] + 4 * f[i + 1] + f[i + 2])
            gauss += 5.0 / 9.0 * step * f[i] + 8.0 / 9.0 * step * f[i + 1] + 5.0 / 9.0 * step * f[i + 2]
        if i % 4 == 0 and i < count - 4:
            nc += 2.0 / 45.0 * step * (7 * f[i] + 32 * f[i + 1] + 12 * f[i + 2] + 32 * f[i + 3] + 7 * f[i + 4])
    return np.array([rect, trap, simp, nc, gauss])


@pytest.mark.parametrize("count", [5, 6, 7, 8, 9, 13, 39, 77])
def test_matches_reference_accumulation(count):
    x = np.linspace(-1.0, 2.0, count)
    step = x[1] - x[0]
    f = np.exp(x) * np.cos(3 * x)

    methods = calculate_numerical_integrals(f, count, step)
    assert methods.shape == (len(RULES),)
    assert np.allclose(methods, _reference(f, count, step), rtol=1e-10, atol=1e-12)


def test_one_pass_matches_single_rule_apply():
    x = np.linspace(0.0, 2.0, 21)
    step = x[1] - x[0]
    f = np.sin(x)
    methods = calculate_numerical_integrals(f, len(f), step)
    for slot, rule in enumerate(RULES):
        assert np.isclose(methods[slot], STENCILS[rule].apply(f, step))


def test_is_deterministic():
    sampled = FunctionSampler().sample(39, -5.5312, 3.32)
    first = integrate(sampled)
    second = integrate(sampled)
    assert np.array_equal(first, second)


def test_constant_function():
    # 9 个点：所有 stencil 都刚好铺满 [0, 8h]
    step = 0.5
    f = np.full(9, 2.0)
    methods = calculate_numerical_integrals(f, 9, step)
    assert np.allclose(methods, 2.0 * 8 * step)


def test_does_not_mutate_input():
    f = np.linspace(0.0, 1.0, 11) ** 2
    before = f.copy()
    calculate_numerical_integrals(f, 11, 0.1)
    assert np.array_equal(f, before)


def test_rejects_invalid_arguments():
    with pytest.raises(ValueError):
        calculate_numerical_integrals(None, 5, 0.1)
    with pytest.raises(ValueError):
        calculate_numerical_integrals(np.ones(4), 4, 0.1)
    with pytest.raises(ValueError):
        calculate_numerical_integrals(np.ones(6), 5, 0.1)
    with pytest.raises(ValueError):
        calculate_numerical_integrals(np.ones(5), 5, 0.0)


def test_errors_zero_when_exact():
    analytic = 1.7
    errors = calculate_errors(analytic, np.full(5, analytic))
    assert np.array_equal(errors, np.zeros(5))


def test_errors_relative_and_monotonic():
    analytic = 2.0
    estimates = np.array([2.1, 1.8, 2.0, 2.4, 1.99])
    errors = calculate_errors(analytic, estimates)
    assert np.allclose(errors, [0.05, 0.1, 0.0, 0.2, 0.005])

    # 离解析值越远误差越大
    diffs = np.abs(analytic - estimates)
    order = np.argsort(diffs)
    assert np.all(np.diff(errors[order]) >= 0)


def test_errors_zero_analytic_is_not_guarded():
    with np.errstate(divide="ignore", invalid="ignore"):
        errors = calculate_errors(0.0, np.array([0.0, 1.0, -1.0, 0.5, 0.0]))
    assert np.isnan(errors[0])
    assert np.isinf(errors[1])


def test_errors_rejects_wrong_length():
    with pytest.raises(ValueError):
        calculate_errors(1.0, np.ones(4))


def test_newton_cotes_beats_trapeze_on_full_cover():
    sampler = FunctionSampler()
    s = sampler.sample(41, 0.0, np.pi)
    errors = calculate_errors(sampler.analytic_integral(0.0, np.pi), integrate(s))
    trap = errors[RULES.index(QuadratureRule.TRAPEZE)]
    nc = errors[RULES.index(QuadratureRule.NEWTON_COTES)]
    assert nc < trap
