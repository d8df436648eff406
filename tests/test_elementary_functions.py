import numpy as np
import pytest

from smg.autodiff import DualNumber


# ==========================================
# 1. Derivatives at a single point
# ==========================================

@pytest.mark.parametrize("x", [-2.0, -0.3, 0.0, 1.0, 4.5])
def test_sin_derivative_is_cos(x):
    r = DualNumber.variable(x).sin()
    assert np.isclose(r.x, np.sin(x))
    assert np.isclose(r.dx, np.cos(x))


def test_cos_derivative():
    r = DualNumber(0.7, 2.0).cos()
    assert np.isclose(r.x, np.cos(0.7))
    assert np.isclose(r.dx, -np.sin(0.7) * 2.0)


def test_exp_derivative_is_exp():
    r = DualNumber(1.3, 0.5).exp()
    assert np.isclose(r.x, np.exp(1.3))
    assert np.isclose(r.dx, np.exp(1.3) * 0.5)


def test_ln_derivative():
    r = DualNumber(4.0, 2.0).ln()
    assert np.isclose(r.x, np.log(4.0))
    assert np.isclose(r.dx, 0.5)


def test_tan_derivative():
    x = 0.4
    r = DualNumber.variable(x).tan()
    assert np.isclose(r.x, np.tan(x))
    assert np.isclose(r.dx, 1.0 / np.cos(x) ** 2)


def test_powi():
    r = DualNumber(3.0, 1.0).powi(2)
    assert (r.x, r.dx) == (9.0, 6.0)

    r = DualNumber(3.0, 1.0).powi(0)
    assert (r.x, r.dx) == (1.0, 0.0)

    r = DualNumber(2.0, 1.0).powi(-2)
    assert np.isclose(r.x, 0.25)
    assert np.isclose(r.dx, -2.0 / 8.0)


def test_pow_operator_matches_powi():
    a = DualNumber(1.5, 0.5)
    for n in (-3, 0, 1, 4):
        assert DualNumber.close(a ** n, a.powi(n), tolerance=1e-12)
    assert DualNumber.close(a ** np.int64(3), a.powi(3), tolerance=1e-12)


def test_powi_rejects_non_integer_exponents():
    with pytest.raises(TypeError):
        DualNumber(2.0, 1.0).powi(1.5)


def test_sqrt_and_inverse():
    r = DualNumber(4.0, 1.0).sqrt()
    assert np.isclose(r.x, 2.0)
    assert np.isclose(r.dx, 0.25)

    r = DualNumber(4.0, 1.0).inverse()
    assert np.isclose(r.x, 0.25)
    assert np.isclose(r.dx, -1.0 / 16.0)


# ==========================================
# 2. Composition
# ==========================================

def test_chain_rule_sin_of_sin():
    w = DualNumber(1.0, 1.0).sin().sin()
    assert np.isclose(w.x, np.sin(np.sin(1.0)))
    assert np.isclose(w.dx, np.cos(np.sin(1.0)) * np.cos(1.0))


def test_composite_expression():
    """d/dx [x^3 * ln(x) + exp(2x) / x] at x = 2."""
    x = 2.0
    a = DualNumber.variable(x)
    r = a.powi(3) * a.ln() + (a * 2.0).exp() / a
    expected = 3 * x ** 2 * np.log(x) + x ** 2 + (2 * np.exp(2 * x) * x - np.exp(2 * x)) / x ** 2
    assert np.isclose(r.x, x ** 3 * np.log(x) + np.exp(2 * x) / x)
    assert np.isclose(r.dx, expected)


def test_derivative_identities_over_many_points(points):
    a = DualNumber.variable(points)

    assert np.allclose(a.sin().dx, np.cos(points))
    assert np.allclose(a.cos().dx, -np.sin(points))
    assert np.allclose(a.exp().dx, np.exp(points))
    assert np.allclose(a.tan().dx, 1.0 / np.cos(points) ** 2)
    assert np.allclose(a.powi(3).dx, 3 * points ** 2)


# ==========================================
# 3. Domain edges
# ==========================================

def test_ln_of_zero_does_not_raise():
    r = DualNumber(0.0, 1.0).ln()
    assert np.isneginf(r.x)
    assert not np.isfinite(r.dx)


def test_ln_of_negative_is_nan():
    r = DualNumber(-2.0, 1.0).ln()
    assert np.isnan(r.x)


def test_sqrt_at_domain_edges():
    r = DualNumber(0.0, 1.0).sqrt()
    assert r.x == 0.0
    assert np.isposinf(r.dx)

    assert np.isnan(DualNumber(-1.0, 1.0).sqrt().x)


def test_negative_powi_at_zero():
    r = DualNumber(0.0, 1.0).powi(-1)
    assert np.isposinf(r.x)
    assert not np.isfinite(r.dx)


def test_exp_overflow():
    r = DualNumber(1000.0, 1.0).exp()
    assert np.isposinf(r.x)
    assert np.isposinf(r.dx)
