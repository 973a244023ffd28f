"""
Orbital Descriptors

Energy levels, node counts, names and human-readable equations derived
from the quantum numbers of an orbital.
"""

from dataclasses import dataclass

from .quantum_constants import (
    ORBITAL_LETTERS,
    ORBITAL_ORIENTATIONS,
    RYDBERG_ENERGY,
    validate_azimuthal,
    validate_magnetic,
    validate_principal,
    validate_quantum_numbers,
)

# Equations for the orbitals shown most often
_WAVE_FUNCTION_EQUATIONS = {
    '1s': 'ψ₁ₛ = (1/√πa₀³) e^(-r/a₀)',
    '2s': 'ψ₂ₛ = (1/4√2πa₀³)(2-r/a₀) e^(-r/2a₀)',
    '2p_z': 'ψ₂ₚ = (1/4√2πa₀³)(r/a₀) e^(-r/2a₀) cos θ',
    '3s': 'ψ₃ₛ = (1/9√3πa₀³)(6-6r/a₀+r²/a₀²) e^(-r/3a₀)',
    '3p_z': 'ψ₃ₚ = (1/9√6πa₀³)(4r/a₀-2r²/3a₀²) e^(-r/3a₀) cos θ',
    '3d_z²': 'ψ₃d = (1/81√30πa₀³)(r²/a₀²) e^(-r/3a₀)(3cos²θ-1)',
}

# Real forms, matching spherical_harmonic
_ANGULAR_EQUATIONS = {
    (0, 0): 'Y₀⁰ = 1/√(4π)',
    (1, -1): 'Y₁⁻¹ = √(3/8π) sin θ sin φ',
    (1, 0): 'Y₁⁰ = √(3/4π) cos θ',
    (1, 1): 'Y₁¹ = -√(3/8π) sin θ cos φ',
    (2, -2): 'Y₂⁻² = √(15/32π) sin²θ sin 2φ',
    (2, -1): 'Y₂⁻¹ = √(15/8π) sin θ cos θ sin φ',
    (2, 0): 'Y₂⁰ = √(5/16π)(3cos²θ-1)',
    (2, 1): 'Y₂¹ = -√(15/8π) sin θ cos θ cos φ',
    (2, 2): 'Y₂² = √(15/32π) sin²θ cos 2φ',
}


@dataclass(frozen=True)
class OrbitalDescriptor:
    n: int
    l: int
    m: int
    name: str
    energy_ev: float
    radial_nodes: int
    angular_nodes: int
    wave_function_equation: str
    radial_function_equation: str
    angular_function_equation: str

# ============================================================================
# Energy and Nodes
# ============================================================================

def energy_level(n):
    """
    Energy of shell n in eV: E_n = -13.6 / n².
    """
    validate_principal(n)
    return -RYDBERG_ENERGY / (n * n)


def get_radial_nodes(n, l):
    """Number of spherical nodes, n - l - 1."""
    validate_quantum_numbers(n, l)
    return n - l - 1


def get_angular_nodes(l):
    """Number of nodal planes/cones, equal to l."""
    validate_azimuthal(l)
    return l

# ============================================================================
# Names
# ============================================================================

def get_subshell_letter(l):
    """Subshell letter for l (s, p, d, f, g, h), or l itself beyond h."""
    validate_azimuthal(l)
    if l < len(ORBITAL_LETTERS):
        return ORBITAL_LETTERS[l]
    return str(l)


def get_orbital_name(n, l, m):
    """
    Get human-readable name for orbital.

    p and d orbitals get a directional suffix for the real orbital that m
    selects; other subshells are named by shell and letter only.

    Args:
        n: Principal quantum number
        l: Azimuthal quantum number
        m: Magnetic quantum number

    Returns:
        str: Orbital name (e.g., "1s", "2p_x", "3d_z²")
    """
    validate_quantum_numbers(n, l, m)

    name = f"{n}{get_subshell_letter(l)}"

    suffix = ORBITAL_ORIENTATIONS.get(l, {}).get(m)
    if suffix:
        name += '_' + suffix

    return name

# ============================================================================
# Equations
# ============================================================================

def get_wave_function_equation(n, l, m):
    """Wave function formula, written out for common orbitals."""
    orbital = get_orbital_name(n, l, m)

    return _WAVE_FUNCTION_EQUATIONS.get(
        orbital,
        f"ψ{n}{get_subshell_letter(l)} = R{n}{l}(r) Y{l}^{m}(θ,φ)",
    )


def get_radial_function_equation(n, l):
    """Radial function formula for R_nl."""
    validate_quantum_numbers(n, l)
    return f"R{n}{l}(r) = N e^(-r/{n}a₀) (2r/{n}a₀)^{l} L{n - l - 1}^({2 * l + 1})(2r/{n}a₀)"


def get_angular_function_equation(l, m):
    """Angular function formula for the real Y_l^m."""
    validate_azimuthal(l)
    validate_magnetic(m, l)

    equation = _ANGULAR_EQUATIONS.get((l, m))
    if equation is not None:
        return equation

    if m > 0:
        azimuthal = f" cos({m}φ)"
    elif m < 0:
        azimuthal = f" sin({-m}φ)"
    else:
        azimuthal = ""
    return f"Y{l}^{m}(θ,φ) = N P{l}^{abs(m)}(cos θ){azimuthal}"

# ============================================================================
# Descriptor
# ============================================================================

def describe_orbital(n, l, m):
    """
    Collect name, energy, node counts and equations for one orbital.

    Returns:
        OrbitalDescriptor
    """
    validate_quantum_numbers(n, l, m)

    return OrbitalDescriptor(
        n=n,
        l=l,
        m=m,
        name=get_orbital_name(n, l, m),
        energy_ev=energy_level(n),
        radial_nodes=get_radial_nodes(n, l),
        angular_nodes=get_angular_nodes(l),
        wave_function_equation=get_wave_function_equation(n, l, m),
        radial_function_equation=get_radial_function_equation(n, l),
        angular_function_equation=get_angular_function_equation(l, m),
    )
