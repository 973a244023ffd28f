import numpy as np
import numpy.testing as npt
import pytest

from hydrogen_orbitals.coordinates import (
    cartesian_to_spherical,
    create_spherical_grid,
    spherical_to_cartesian,
)


def test_round_trip_random_points():
    rng = np.random.default_rng(0)
    points = rng.normal(scale=10.0, size=(500, 3))
    points = points[np.linalg.norm(points, axis=1) > 1e-6]

    r, theta, phi = cartesian_to_spherical(points[:, 0], points[:, 1], points[:, 2])
    x, y, z = spherical_to_cartesian(r, theta, phi)

    npt.assert_allclose(np.stack([x, y, z], axis=1), points, atol=1e-6)


def test_round_trip_scalar():
    r, theta, phi = cartesian_to_spherical(1.0, -2.0, 0.5)
    x, y, z = spherical_to_cartesian(r, theta, phi)

    assert np.ndim(r) == 0
    assert (x, y, z) == pytest.approx((1.0, -2.0, 0.5), abs=1e-6)


def test_axes():
    assert spherical_to_cartesian(2.0, 0.0, 0.0) == pytest.approx((0.0, 0.0, 2.0))
    assert spherical_to_cartesian(2.0, np.pi / 2, 0.0) == pytest.approx((2.0, 0.0, 0.0), abs=1e-15)
    assert spherical_to_cartesian(2.0, np.pi / 2, np.pi / 2) == pytest.approx((0.0, 2.0, 0.0), abs=1e-15)


def test_azimuth_range():
    _, _, phi = cartesian_to_spherical(-1.0, -1.0, 0.0)
    assert phi == pytest.approx(-3 * np.pi / 4)


def test_origin_is_defined():
    r, theta, phi = cartesian_to_spherical(0.0, 0.0, 0.0)

    assert r == 0
    assert theta == pytest.approx(np.pi / 2)
    assert phi == 0


def test_spherical_grid():
    r, theta, phi = create_spherical_grid(max_r=20.0, num_points=50)

    assert len(r) == len(theta) == len(phi) == 50
    assert r[0] == pytest.approx(0.4)
    assert r[-1] == pytest.approx(20.0)
    assert theta[0] == 0 and theta[-1] == pytest.approx(np.pi)
    assert phi[-1] == pytest.approx(2 * np.pi)


def test_spherical_grid_needs_two_points():
    with pytest.raises(ValueError):
        create_spherical_grid(num_points=1)
