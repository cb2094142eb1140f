"""
Spherical geometry helpers shared by the function catalog.

Convention:
    - theta is the polar angle (colatitude) measured from +z, range [0, π]
    - phi is the azimuthal angle measured from +x in the xy-plane, range [0, 2π)

Inputs are not validated; out-of-range angles are accepted and evaluated
through the usual trigonometric identities.
"""

from typing import Any, Tuple, Union
import numpy as np

from sphcollection.core.precision import as_float

__all__ = [
    "spherical_to_xyz",
    "sign",
    "dot",
]

ArrayLike = Union[float, np.floating, np.ndarray]


def spherical_to_xyz(theta: Any, phi: Any) -> Tuple[ArrayLike, ArrayLike, ArrayLike]:
    """
    Convert spherical angles to a point on the unit sphere.

    Args:
        theta: Polar angle in radians
        phi: Azimuthal angle in radians

    Returns:
        x, y, z in the precision of the inputs
    """
    theta, phi = as_float(theta, phi)
    sin_theta = np.sin(theta)
    x = sin_theta * np.cos(phi)
    y = sin_theta * np.sin(phi)
    z = np.cos(theta)
    return x, y, z


def sign(value: Any) -> Union[int, np.integer, np.ndarray]:
    """
    Sign of a value: 1 if positive, -1 if negative, 0 otherwise.

    Strict comparisons are used on both sides, so zero and NaN map to 0.
    """
    return np.greater(value, 0).astype(int) - np.less(value, 0).astype(int)


def dot(x1: ArrayLike, y1: ArrayLike, z1: ArrayLike, x2: ArrayLike, y2: ArrayLike, z2: ArrayLike) -> ArrayLike:
    """Euclidean inner product of two 3-vectors."""
    return x1 * x2 + y1 * y2 + z1 * z2
