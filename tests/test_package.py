"""
Unit tests for the top-level package surface.
"""

import pytest

import sphcollection


class TestPackage:
    """Test top-level exports."""

    def test_version(self):
        """Test the version string is exposed."""
        assert sphcollection.__version__ == "0.1.0"

    def test_catalog_reexported(self):
        """Test catalog functions are importable from the package root."""
        assert sphcollection.fornberg_f1(0.0, 0.0) == 1.0
        assert "cf_15" in sphcollection.__all__

    def test_lazy_attributes(self):
        """Test configuration and geometry are reachable lazily."""
        assert sphcollection.Config().precision.default is sphcollection.Precision.DOUBLE
        assert sphcollection.geometry.sign(-3.0) == -1
        assert sphcollection.get_config() is sphcollection.get_config()

    def test_unknown_attribute(self):
        """Test unknown attributes raise AttributeError."""
        with pytest.raises(AttributeError):
            sphcollection.does_not_exist
