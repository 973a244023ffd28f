"""
Special Functions

Factorials, associated Laguerre polynomials, and associated Legendre
functions used by the radial and angular parts of the hydrogen wave
function. Polynomials are evaluated with three-term recurrences, which are
stable and cost O(n) per point.
"""

import numbers

import numpy as np
from scipy import special

from .quantum_constants import FACTORIAL_CACHE_SIZE


def unwrap_scalar(value):
    """Return a numpy scalar for 0-d input and the array itself otherwise."""
    return np.asarray(value)[()]

# ============================================================================
# Factorials
# ============================================================================

def _build_factorial_cache(size):
    cache = [1.0]  # 0! = 1
    for i in range(1, size + 1):
        cache.append(cache[-1] * i)
    return tuple(cache)


_FACTORIAL_CACHE = _build_factorial_cache(FACTORIAL_CACHE_SIZE)


def _check_order(value, name):
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def factorial(n):
    """
    Calculate n! as a float.

    Values up to 20! come from a table built at import; larger values are
    extended by multiplying upward from the cached 20!.

    Args:
        n: Non-negative integer

    Returns:
        float: n!

    Raises:
        ValueError: If n is negative
    """
    _check_order(n, "n")

    if n <= FACTORIAL_CACHE_SIZE:
        return _FACTORIAL_CACHE[n]

    result = _FACTORIAL_CACHE[FACTORIAL_CACHE_SIZE]
    for i in range(FACTORIAL_CACHE_SIZE + 1, n + 1):
        result *= i
    return result


def log_factorial(n):
    """Natural logarithm of n!, finite far beyond where n! overflows."""
    _check_order(n, "n")
    return float(special.gammaln(n + 1))


def factorial_ratio(a, b):
    """
    Calculate a! / b!.

    Divides cached factorials while both fit the table and falls back to
    log-space otherwise, where plain factorials overflow or lose digits.
    """
    if max(a, b) <= FACTORIAL_CACHE_SIZE:
        return factorial(a) / factorial(b)
    return float(np.exp(log_factorial(a) - log_factorial(b)))

# ============================================================================
# Associated Laguerre Polynomials
# ============================================================================

def associated_laguerre(x, n, alpha):
    """
    Calculate the associated Laguerre polynomial L_n^alpha(x).

    Uses the recurrence:
        L_0 = 1
        L_1 = 1 + alpha - x
        L_k = [(2k - 1 + alpha - x) L_{k-1} - (k - 1 + alpha) L_{k-2}] / k

    Args:
        x: Evaluation point(s)
        n: Degree of polynomial
        alpha: Generalized parameter

    Returns:
        Value(s) of L_n^alpha(x)
    """
    _check_order(n, "Degree n")
    x = np.asarray(x, dtype=float)

    if n == 0:
        return unwrap_scalar(np.ones_like(x))

    L_prev = np.ones_like(x)
    L_curr = 1.0 + alpha - x

    for k in range(2, n + 1):
        L_next = ((2 * k - 1 + alpha - x) * L_curr - (k - 1 + alpha) * L_prev) / k
        L_prev, L_curr = L_curr, L_next

    return unwrap_scalar(L_curr)

# ============================================================================
# Associated Legendre Functions
# ============================================================================

def associated_legendre(l, m, x, condon_shortley=True):
    """
    Calculate the associated Legendre function P_l^|m|(x).

    Starts from the closed form P_m^m = (2m-1)!! (1-x²)^(m/2), steps once to
    P_{m+1}^m = x (2m+1) P_m^m and then recurs upward in degree:
        P_k^m = [(2k - 1) x P_{k-1}^m - (k + m - 1) P_{k-2}^m] / (k - m)

    Args:
        l: Degree (l ≥ 0)
        m: Order; only |m| is used
        x: Evaluation point(s) in [-1, 1], usually cos(θ)
        condon_shortley: Include the (-1)^m phase, as scipy.special.lpmv does

    Returns:
        Value(s) of P_l^|m|(x)
    """
    _check_order(l, "Degree l")
    m_abs = abs(int(m))
    if m_abs > l:
        raise ValueError(f"Order |m| must not exceed degree l, got m={m}, l={l}")

    x = np.asarray(x, dtype=float)
    sin_part = np.sqrt(np.clip((1.0 - x) * (1.0 + x), 0.0, None))

    P_mm = np.ones_like(x)
    odd_factor = 1.0
    for _ in range(m_abs):
        P_mm = P_mm * odd_factor * sin_part
        odd_factor += 2.0

    if condon_shortley and m_abs % 2 == 1:
        P_mm = -P_mm

    if l == m_abs:
        return unwrap_scalar(P_mm)

    P_prev = P_mm
    P_curr = x * (2 * m_abs + 1) * P_mm

    for k in range(m_abs + 2, l + 1):
        P_next = ((2 * k - 1) * x * P_curr - (k + m_abs - 1) * P_prev) / (k - m_abs)
        P_prev, P_curr = P_curr, P_next

    return unwrap_scalar(P_curr)
