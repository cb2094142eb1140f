"""
Core modules for sphcollection.

Subpackages:
    geometry: Spherical-to-Cartesian transform and numeric helpers
    precision: Working-precision resolution for precision-generic evaluation
"""

from sphcollection.core import geometry
from sphcollection.core import precision

__all__ = ["geometry", "precision"]
