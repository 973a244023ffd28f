"""
Quantum Constants and Definitions

Physical constants, quantum number rules, and naming tables for hydrogen
orbital calculations. All lengths are in Bohr radii.
"""

import numbers

import numpy as np

# ============================================================================
# Physical Constants (atomic units unless otherwise noted)
# ============================================================================

# Bohr radius (normalized)
BOHR_RADIUS = 1.0

# Ground state binding energy used for E_n = -13.6 / n² (eV)
RYDBERG_ENERGY = 13.6  # eV

# Guard against division by zero at the origin
COORDINATE_EPSILON = 1e-10

FOUR_PI = 4.0 * np.pi

# ============================================================================
# Numerical Settings
# ============================================================================

# Factorials 0! .. 20! are cached (20! is the last one exact in a double)
FACTORIAL_CACHE_SIZE = 20

# ============================================================================
# Orbital Naming
# ============================================================================

# Subshell letters; l beyond this table is written as a number
ORBITAL_LETTERS = ('s', 'p', 'd', 'f', 'g', 'h')

# Directional suffixes for the real p and d orbitals
ORBITAL_ORIENTATIONS = {
    1: {
        -1: 'y',
        0: 'z',
        1: 'x',
    },
    2: {
        -2: 'xy',
        -1: 'yz',
        0: 'z²',
        1: 'xz',
        2: 'x²-y²',
    },
}

# ============================================================================
# Quantum Number Validation
# ============================================================================

class InvalidQuantumNumbers(ValueError):
    """Raised when (n, l, m) does not describe a hydrogen orbital."""


def _is_integer(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_principal(n):
    """
    Validate the principal quantum number.

    Raises:
        InvalidQuantumNumbers: If n is not an integer ≥ 1
    """
    if not _is_integer(n) or n < 1:
        raise InvalidQuantumNumbers(
            f"Principal quantum number n must be positive integer, got {n}"
        )


def validate_azimuthal(l, n=None):
    """
    Validate the azimuthal quantum number, optionally against n.

    Raises:
        InvalidQuantumNumbers: If l < 0, or l ≥ n when n is given
    """
    if not _is_integer(l) or l < 0:
        raise InvalidQuantumNumbers(
            f"Azimuthal quantum number l must be a non-negative integer, got {l}"
        )
    if n is not None and l >= n:
        raise InvalidQuantumNumbers(
            f"Azimuthal quantum number l must be 0 ≤ l < n, got l={l}, n={n}"
        )


def validate_magnetic(m, l):
    """
    Validate the magnetic quantum number against l.

    Raises:
        InvalidQuantumNumbers: If m is not an integer with |m| ≤ l
    """
    if not _is_integer(m) or abs(m) > l:
        raise InvalidQuantumNumbers(
            f"Magnetic quantum number m must satisfy |m| ≤ l, got m={m}, l={l}"
        )


def validate_quantum_numbers(n, l, m=0):
    """
    Validate quantum numbers for hydrogen orbitals.

    Args:
        n: Principal quantum number
        l: Azimuthal quantum number
        m: Magnetic quantum number

    Returns:
        bool: True if valid

    Raises:
        InvalidQuantumNumbers: If quantum numbers are invalid
    """
    validate_principal(n)
    validate_azimuthal(l, n)
    validate_magnetic(m, l)

    return True

# ============================================================================
# Utility Functions
# ============================================================================

def get_orbital_extent(n):
    """
    Get the radius (in Bohr radii) that encloses the visible orbital.

    Grows as n² since the most probable radius of a shell scales with n².

    Args:
        n: Principal quantum number

    Returns:
        float: Extent in Bohr radii
    """
    validate_principal(n)
    return float(max(20, 5 * n ** 2))
