"""
Coordinate Transforms

Conversion between Cartesian and spherical coordinates, and the simple
spherical sampling grid used when probing an orbital. θ is the polar angle
measured from +z, φ the azimuth measured from +x.
"""

import numpy as np

from .quantum_constants import COORDINATE_EPSILON
from .special_functions import unwrap_scalar


def spherical_to_cartesian(r, theta, phi):
    """
    Convert spherical coordinates to Cartesian coordinates.

    Args:
        r: Radial distance (can be array)
        theta: Polar angle (0 to π)
        phi: Azimuthal angle

    Returns:
        (x, y, z): Cartesian coordinates
    """
    r, theta, phi = np.asarray(r), np.asarray(theta), np.asarray(phi)

    x = r * np.sin(theta) * np.cos(phi)
    y = r * np.sin(theta) * np.sin(phi)
    z = r * np.cos(theta)

    return unwrap_scalar(x), unwrap_scalar(y), unwrap_scalar(z)


def cartesian_to_spherical(x, y, z):
    """
    Convert Cartesian coordinates to spherical coordinates.

    At the origin θ = acos(0) = π/2; the value is arbitrary but defined.

    Args:
        x, y, z: Cartesian coordinates (can be arrays)

    Returns:
        (r, theta, phi): Spherical coordinates
            r: Radial distance
            theta: Polar angle (0 to π), acos(z / (r + ε))
            phi: Azimuthal angle (-π to π], atan2(y, x)
    """
    x, y, z = np.asarray(x), np.asarray(y), np.asarray(z)

    r = np.sqrt(x ** 2 + y ** 2 + z ** 2)
    # z/(r+ε) is always inside [-1, 1]
    theta = np.arccos(z / (r + COORDINATE_EPSILON))
    phi = np.arctan2(y, x)

    return unwrap_scalar(r), unwrap_scalar(theta), unwrap_scalar(phi)


def create_spherical_grid(max_r=20.0, num_points=50):
    """
    Create 1-D sample axes for r, θ and φ.

    r starts one step away from the nucleus so the first sample is never the
    origin; θ spans [0, π] and φ spans [0, 2π], both inclusive.

    Args:
        max_r: Outermost radius (Bohr radii)
        num_points: Samples per axis (≥ 2)

    Returns:
        tuple: (r, theta, phi) arrays of length num_points
    """
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")

    i = np.arange(num_points)
    r = (i + 1) * max_r / num_points
    theta = i * np.pi / (num_points - 1)
    phi = i * 2 * np.pi / (num_points - 1)

    return r, theta, phi
