"""
Tests for factorials, Laguerre polynomials and Legendre functions.

Verifies:
1. Cached and extended factorials agree with exact integer factorials
2. Laguerre recurrence matches scipy.special.eval_genlaguerre
3. Legendre recurrence matches scipy.special.lpmv
"""

import math

import numpy as np
import numpy.testing as npt
import pytest
from scipy import special

from hydrogen_orbitals.special_functions import (
    associated_laguerre,
    associated_legendre,
    factorial,
    factorial_ratio,
    log_factorial,
)

# ============================================================================
# Factorials
# ============================================================================

def test_factorial_small_values():
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(5) == 120
    assert factorial(20) == math.factorial(20)


def test_factorial_extends_from_cache():
    """Beyond the table the value is built on top of 20!."""
    assert factorial(21) == factorial(20) * 21
    assert factorial(22) == factorial(20) * 21 * 22
    assert math.isclose(factorial(30), math.factorial(30), rel_tol=1e-14)


def test_factorial_rejects_negative_and_non_integer():
    with pytest.raises(ValueError):
        factorial(-1)
    with pytest.raises(TypeError):
        factorial(2.5)


def test_log_factorial():
    assert math.isclose(log_factorial(10), math.log(3628800), rel_tol=1e-14)
    assert log_factorial(0) == 0.0
    # 500! overflows a double; its logarithm does not
    assert math.isclose(log_factorial(500), math.lgamma(501), rel_tol=1e-14)


def test_factorial_ratio_both_paths():
    assert factorial_ratio(3, 5) == pytest.approx(1 / 20)
    assert factorial_ratio(30, 25) == pytest.approx(26 * 27 * 28 * 29 * 30, rel=1e-12)
    assert factorial_ratio(0, 40) == pytest.approx(1 / math.factorial(40), rel=1e-12)

# ============================================================================
# Associated Laguerre Polynomials
# ============================================================================

@pytest.mark.parametrize("alpha", [0, 1, 3, 5.5])
def test_laguerre_degree_zero_is_one(alpha):
    x = np.linspace(-3.0, 40.0, 17)
    result = associated_laguerre(x, 0, alpha)

    assert result.shape == x.shape
    assert np.all(result == 1.0)
    assert associated_laguerre(123.4, 0, alpha) == 1.0


def test_laguerre_degree_one():
    x = np.array([0.0, 0.5, 2.0, 7.0])
    npt.assert_allclose(associated_laguerre(x, 1, 3), 1 + 3 - x)


@pytest.mark.parametrize("n", range(0, 9))
@pytest.mark.parametrize("alpha", [0, 1, 3, 7])
def test_laguerre_matches_scipy(n, alpha):
    x = np.linspace(0.0, 20.0, 41)
    npt.assert_allclose(
        associated_laguerre(x, n, alpha),
        special.eval_genlaguerre(n, alpha, x),
        rtol=1e-10,
        atol=1e-8,
    )


def test_laguerre_scalar_input_gives_scalar():
    value = associated_laguerre(1.0, 2, 3)

    assert np.ndim(value) == 0
    # L_2^3(1) = (x² - 10x + 20)/2 at x = 1
    assert value == pytest.approx(5.5)


def test_laguerre_rejects_negative_degree():
    with pytest.raises(ValueError):
        associated_laguerre(1.0, -1, 0)

# ============================================================================
# Associated Legendre Functions
# ============================================================================

@pytest.mark.parametrize("l", range(0, 9))
def test_legendre_matches_scipy(l):
    x = np.linspace(-1.0, 1.0, 41)
    for m in range(0, l + 1):
        npt.assert_allclose(
            associated_legendre(l, m, x),
            special.lpmv(m, l, x),
            rtol=1e-10,
            atol=1e-8,
        )


def test_legendre_uses_absolute_order():
    x = np.linspace(-0.9, 0.9, 7)
    npt.assert_allclose(associated_legendre(3, -2, x), associated_legendre(3, 2, x))


def test_legendre_without_condon_shortley_phase():
    x = np.linspace(-1.0, 1.0, 11)
    npt.assert_allclose(associated_legendre(1, 1, x, condon_shortley=False), np.sqrt(1 - x ** 2))
    npt.assert_allclose(associated_legendre(1, 1, x), -np.sqrt(1 - x ** 2))


def test_legendre_rejects_order_above_degree():
    with pytest.raises(ValueError):
        associated_legendre(2, 3, 0.5)
