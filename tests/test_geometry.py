"""
Unit tests for the spherical coordinate transform and numeric helpers.
"""

import numpy as np
import pytest

from sphcollection.core.geometry import dot, sign, spherical_to_xyz


class TestSphericalToXyz:
    """Test conversion from (theta, phi) to points on the unit sphere."""

    def test_unit_norm_double(self, full_grid):
        """Test points lie on the unit sphere in double precision."""
        x, y, z = spherical_to_xyz(*full_grid)
        norm = x * x + y * y + z * z
        assert np.max(np.abs(norm - 1.0)) < 1e-12

    def test_unit_norm_single(self, full_grid):
        """Test points lie on the unit sphere in single precision."""
        theta, phi = (g.astype(np.float32) for g in full_grid)
        x, y, z = spherical_to_xyz(theta, phi)
        assert x.dtype == np.float32
        norm = x * x + y * y + z * z
        assert np.max(np.abs(norm - 1.0)) < 1e-5

    def test_north_pole(self):
        """Test theta = 0 maps to +z."""
        x, y, z = spherical_to_xyz(0.0, 0.0)
        assert (x, y, z) == (0.0, 0.0, 1.0)

    def test_equator_axes(self):
        """Test equator points at phi = 0 and phi = pi/2."""
        x, y, z = spherical_to_xyz(np.pi / 2, 0.0)
        assert x == pytest.approx(1.0)
        assert y == pytest.approx(0.0)
        assert z == pytest.approx(0.0, abs=1e-15)

        x, y, z = spherical_to_xyz(np.pi / 2, np.pi / 2)
        assert x == pytest.approx(0.0, abs=1e-15)
        assert y == pytest.approx(1.0)

    def test_scalar_in_scalar_out(self):
        """Test scalar inputs give numpy scalars of the input precision."""
        x, y, z = spherical_to_xyz(np.float32(0.3), np.float32(1.1))
        assert isinstance(x, np.float32)
        assert isinstance(z, np.float32)

    def test_broadcasting(self):
        """Test theta and phi broadcast against each other."""
        theta = np.linspace(0.0, np.pi, 5)[:, None]
        phi = np.linspace(0.0, 2.0 * np.pi, 7)[None, :]
        x, y, z = spherical_to_xyz(theta, phi)
        assert x.shape == (5, 7)
        assert z.shape == (5, 1)

    def test_nan_propagates(self):
        """Test NaN input yields NaN output without raising."""
        x, y, z = spherical_to_xyz(np.nan, 0.5)
        assert np.isnan(x) and np.isnan(y) and np.isnan(z)

    def test_out_of_range_angles_accepted(self):
        """Test angles outside [0, pi] x [0, 2pi) are evaluated, not rejected."""
        x, y, z = spherical_to_xyz(-np.pi / 2, 3.0 * np.pi)
        assert x * x + y * y + z * z == pytest.approx(1.0)


class TestSign:
    """Test the three-valued sign helper."""

    @pytest.mark.parametrize("value", [1e-300, 0.5, 3, np.float32(2.0), np.inf])
    def test_positive(self, value):
        """Test positive values map to 1."""
        assert sign(value) == 1

    @pytest.mark.parametrize("value", [-1e-300, -0.5, -3, np.float32(-2.0), -np.inf])
    def test_negative(self, value):
        """Test negative values map to -1."""
        assert sign(value) == -1

    @pytest.mark.parametrize("value", [0, 0.0, -0.0, np.float32(0.0)])
    def test_zero(self, value):
        """Test zero (including negative zero) maps to 0."""
        assert sign(value) == 0

    def test_nan_maps_to_zero(self):
        """Test NaN compares false both ways and maps to 0."""
        assert sign(np.nan) == 0

    def test_array(self):
        """Test element-wise evaluation on arrays."""
        values = np.array([-2.0, -0.0, 0.0, 3.5, np.nan])
        np.testing.assert_array_equal(sign(values), [-1, 0, 0, 1, 0])


class TestDot:
    """Test the 3-vector inner product."""

    def test_self_product(self):
        """Test dot(a, a) is the squared norm."""
        assert dot(1.0, 2.0, 3.0, 1.0, 2.0, 3.0) == 14.0

    def test_symmetric(self):
        """Test dot(a, b) == dot(b, a)."""
        a = (0.3, -1.2, 2.5)
        b = (4.0, 0.25, -0.75)
        assert dot(*a, *b) == dot(*b, *a)

    def test_bilinear(self):
        """Test linearity in the first argument."""
        a = np.array([0.3, -1.2, 2.5])
        c = np.array([-0.4, 0.9, 0.1])
        b = np.array([4.0, 0.25, -0.75])
        lhs = dot(*(2.0 * a + 3.0 * c), *b)
        rhs = 2.0 * dot(*a, *b) + 3.0 * dot(*c, *b)
        assert lhs == pytest.approx(rhs)

    def test_no_normalization(self):
        """Test vectors are not normalized."""
        assert dot(2.0, 0.0, 0.0, 3.0, 0.0, 0.0) == 6.0
