"""
Hydrogen Wave Function Calculations

Implements radial wave functions, spherical harmonics, and complete
hydrogen orbital wave functions with proper normalization.

Angular convention: spherical_harmonic returns real orbitals built from the
complex Condon-Shortley harmonic Y_l^m = N P_l^|m|(cos θ) e^(imφ):

    m > 0:  Re Y_l^m
    m = 0:  Y_l^0
    m < 0:  (-1)^|m| Im Y_l^|m|

They keep the complex normalization, so ∫Y² dΩ is 1 for m = 0 and 1/2
otherwise. Use complex_spherical_harmonic for the eigenfunction convention.
"""

import logging
from functools import lru_cache
from types import MappingProxyType

import numpy as np
from scipy.integrate import dblquad, quad

from .coordinates import cartesian_to_spherical
from .quantum_constants import (
    BOHR_RADIUS,
    FACTORIAL_CACHE_SIZE,
    FOUR_PI,
    get_orbital_extent,
    validate_azimuthal,
    validate_magnetic,
    validate_quantum_numbers,
)
from .special_functions import (
    associated_laguerre,
    associated_legendre,
    factorial_ratio,
    unwrap_scalar,
)

log = logging.getLogger(__name__)

# ============================================================================
# Radial Wave Functions
# ============================================================================

@lru_cache(maxsize=None)
def radial_normalization(n, l):
    """
    Normalization constant of R_nl.

    N = sqrt((2/n a0)³ * (n-l-1)! / (2n * (n+l)!))
    """
    if n + l > FACTORIAL_CACHE_SIZE:
        log.debug("Radial normalization for n=%d, l=%d evaluated in log-space", n, l)

    return float(np.sqrt(
        (2.0 / (n * BOHR_RADIUS)) ** 3 *
        factorial_ratio(n - l - 1, n + l) /
        (2.0 * n)
    ))


def radial_wavefunction(r, n, l):
    """
    Calculate radial part of hydrogen wave function R_nl(r).

    Uses the formula:
    R_nl(r) = N * exp(-ρ/2) * ρ^l * L_{n-l-1}^{2l+1}(ρ),  ρ = 2r/(n*a0)

    Args:
        r: Radial distance (in Bohr radii, can be array)
        n: Principal quantum number (1, 2, 3, ...)
        l: Azimuthal quantum number (0 to n-1)

    Returns:
        R_nl(r): Radial wave function value(s); 0 wherever r ≤ 0
    """
    validate_quantum_numbers(n, l, 0)

    r = np.asarray(r, dtype=float)
    r_safe = np.where(r > 0, r, 0.0)

    # Dimensionless radial coordinate
    rho = 2.0 * r_safe / (n * BOHR_RADIUS)

    R_nl = (
        radial_normalization(n, l) *
        np.exp(-rho / 2.0) *
        rho ** l *
        associated_laguerre(rho, n - l - 1, 2 * l + 1)
    )

    return unwrap_scalar(np.where(r > 0, R_nl, 0.0))


def radial_probability_density(r, n, l):
    """
    Calculate radial probability density 4πr²|R_nl(r)|².

    Args:
        r: Radial distance (in Bohr radii, can be array)
        n, l: Quantum numbers

    Returns:
        Density value(s), never negative
    """
    r = np.asarray(r, dtype=float)
    R_nl = radial_wavefunction(r, n, l)
    return unwrap_scalar(FOUR_PI * r ** 2 * R_nl ** 2)

# ============================================================================
# Spherical Harmonics
# ============================================================================

_Y00 = 1.0 / np.sqrt(4 * np.pi)

# Closed forms for l ≤ 2, keyed by (l, m)
_CLOSED_FORM_HARMONICS = MappingProxyType({
    # s orbitals (l=0)
    (0, 0): lambda theta, phi: np.full(np.broadcast(theta, phi).shape, _Y00),

    # p orbitals (l=1)
    (1, -1): lambda theta, phi: np.sqrt(3 / (8 * np.pi)) * np.sin(theta) * np.sin(phi),
    (1, 0): lambda theta, phi: np.sqrt(3 / (4 * np.pi)) * np.cos(theta) + 0.0 * phi,
    (1, 1): lambda theta, phi: -np.sqrt(3 / (8 * np.pi)) * np.sin(theta) * np.cos(phi),

    # d orbitals (l=2)
    (2, -2): lambda theta, phi: np.sqrt(15 / (32 * np.pi)) * np.sin(theta) ** 2 * np.sin(2 * phi),
    (2, -1): lambda theta, phi: np.sqrt(15 / (8 * np.pi)) * np.sin(theta) * np.cos(theta) * np.sin(phi),
    (2, 0): lambda theta, phi: np.sqrt(5 / (16 * np.pi)) * (3 * np.cos(theta) ** 2 - 1) + 0.0 * phi,
    (2, 1): lambda theta, phi: -np.sqrt(15 / (8 * np.pi)) * np.sin(theta) * np.cos(theta) * np.cos(phi),
    (2, 2): lambda theta, phi: np.sqrt(15 / (32 * np.pi)) * np.sin(theta) ** 2 * np.cos(2 * phi),
})


@lru_cache(maxsize=None)
def spherical_harmonic_normalization(l, m):
    """N_lm = sqrt((2l+1)/(4π) * (l-|m|)!/(l+|m|)!)"""
    m_abs = abs(m)
    return float(np.sqrt((2 * l + 1) / (4 * np.pi) * factorial_ratio(l - m_abs, l + m_abs)))


def _general_real_harmonic(theta, phi, l, m):
    m_abs = abs(m)
    legendre = associated_legendre(l, m_abs, np.cos(theta))

    if m > 0:
        azimuthal = np.cos(m * phi)
    elif m < 0:
        azimuthal = (-1) ** m_abs * np.sin(m_abs * phi)
    else:
        azimuthal = np.ones_like(phi)

    return spherical_harmonic_normalization(l, m) * legendre * azimuthal


def spherical_harmonic(theta, phi, l, m):
    """
    Calculate the real spherical harmonic Y_l^m(θ, φ).

    Common orbitals (l ≤ 2) use exact closed forms; higher l goes through
    the associated Legendre recurrence. Both paths give the same values.

    Args:
        theta: Polar angle (0 to π), measured from +z axis
        phi: Azimuthal angle, measured from +x axis
        l: Azimuthal quantum number (0, 1, 2, ...)
        m: Magnetic quantum number (-l to +l); ignored for l = 0

    Returns:
        Y_l^m(θ, φ): Real spherical harmonic value(s)
    """
    validate_azimuthal(l)
    theta = np.asarray(theta, dtype=float)
    phi = np.asarray(phi, dtype=float)

    if l == 0:
        return unwrap_scalar(np.full(np.broadcast(theta, phi).shape, _Y00))

    validate_magnetic(m, l)

    closed_form = _CLOSED_FORM_HARMONICS.get((l, m))
    if closed_form is not None:
        return unwrap_scalar(closed_form(theta, phi))

    theta, phi = np.broadcast_arrays(theta, phi)
    return unwrap_scalar(_general_real_harmonic(theta, phi, l, m))


def complex_spherical_harmonic(theta, phi, l, m):
    """
    Calculate the complex spherical harmonic Y_l^m(θ, φ).

    Standard quantum-mechanical convention with the Condon-Shortley phase:
    Y_l^m = N_lm P_l^m(cos θ) e^(imφ), and Y_l^-m = (-1)^m conj(Y_l^m).

    Args:
        theta: Polar angle (0 to π)
        phi: Azimuthal angle
        l, m: Quantum numbers

    Returns:
        Complex value(s) of Y_l^m(θ, φ)
    """
    validate_azimuthal(l)
    validate_magnetic(m, l)

    theta = np.asarray(theta, dtype=float)
    phi = np.asarray(phi, dtype=float)
    m_abs = abs(m)

    Y_lm = (
        spherical_harmonic_normalization(l, m) *
        associated_legendre(l, m_abs, np.cos(theta)) *
        np.exp(1j * m_abs * phi)
    )
    if m < 0:
        Y_lm = (-1) ** m_abs * np.conj(Y_lm)

    return unwrap_scalar(Y_lm)

# ============================================================================
# Complete Hydrogen Wave Functions
# ============================================================================

def wave_function(r, theta, phi, n, l, m):
    """
    Calculate the hydrogen wave function ψ_nlm(r, θ, φ) = R_nl(r) Y_l^m(θ, φ).

    Real-valued: the angular part is the real orbital form described in
    the module docstring.

    Args:
        r, theta, phi: Spherical coordinates (can be arrays)
        n, l, m: Quantum numbers

    Returns:
        ψ_nlm value(s)
    """
    validate_quantum_numbers(n, l, m)

    R_nl = radial_wavefunction(r, n, l)
    Y_lm = spherical_harmonic(theta, phi, l, m)

    return unwrap_scalar(R_nl * Y_lm)


def probability_density(r, theta, phi, n, l, m):
    """
    Calculate probability density |ψ_nlm(r, θ, φ)|².

    Returns:
        |ψ|²: Probability density value(s)
    """
    psi = wave_function(r, theta, phi, n, l, m)
    return unwrap_scalar(np.abs(psi) ** 2)


def hydrogen_orbital(n, l, m, x, y, z):
    """
    Calculate hydrogen wave function value at position (x, y, z).

    Args:
        n, l, m: Quantum numbers
        x, y, z: Cartesian coordinates (in Bohr radii, can be arrays)

    Returns:
        ψ_nlm value(s)
    """
    r, theta, phi = cartesian_to_spherical(x, y, z)
    return wave_function(r, theta, phi, n, l, m)


def get_orbital_function(n, l, m):
    """
    Get callable function for specific orbital.

    Args:
        n, l, m: Quantum numbers

    Returns:
        Callable function that takes (x, y, z) and returns ψ
    """
    validate_quantum_numbers(n, l, m)

    return lambda x, y, z: hydrogen_orbital(n, l, m, x, y, z)

# ============================================================================
# Normalization
# ============================================================================

def radial_normalization_integral(n, l, r_max=None):
    """
    Integrate r²|R_nl(r)|² from 0 to r_max (should be close to 1.0).

    Args:
        n, l: Quantum numbers
        r_max: Upper limit in Bohr radii (default: three orbital extents)

    Returns:
        float: Integral value
    """
    validate_quantum_numbers(n, l, 0)

    if r_max is None:
        # For n = 2 about 2e-5 of the density lies beyond one extent
        r_max = 3 * get_orbital_extent(n)

    result, error = quad(
        lambda r: r ** 2 * radial_wavefunction(r, n, l) ** 2,
        0, r_max,
        limit=200,
    )
    log.debug("∫r²R_%d%d² dr over [0, %g] = %.8f (±%.1e)", n, l, r_max, result, error)

    return result


def angular_normalization_integral(l, m):
    """
    Integrate |Y_l^m|² over the unit sphere.

    Returns:
        float: 1.0 for m = 0, 0.5 otherwise (see module docstring)
    """
    validate_azimuthal(l)
    validate_magnetic(m, l)

    result, error = dblquad(
        lambda theta, phi: spherical_harmonic(theta, phi, l, m) ** 2 * np.sin(theta),
        0, 2 * np.pi,       # phi: 0 to 2π
        0, np.pi,           # theta: 0 to π
    )
    log.debug("∫Y_%d^%d² dΩ = %.8f (±%.1e)", l, m, result, error)

    return result


def verify_normalization(n, l, m, r_max=None):
    """
    Verify that wave function is normalized: ∫|ψ|²dV = 1 (1/2 for m ≠ 0).

    ψ separates into radial and angular factors, so the volume integral is
    the product of the two one- and two-dimensional integrals.

    Returns:
        float: Integral value
    """
    validate_quantum_numbers(n, l, m)
    return radial_normalization_integral(n, l, r_max) * angular_normalization_integral(l, m)
