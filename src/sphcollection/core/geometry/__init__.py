"""
Spherical geometry utilities.

This module provides the coordinate transform from spherical angles to
Cartesian points on S² and the small numeric helpers used by the catalog.
"""

from sphcollection.core.geometry.spherical import (
    spherical_to_xyz,
    sign,
    dot,
)

__all__ = [
    "spherical_to_xyz",
    "sign",
    "dot",
]
