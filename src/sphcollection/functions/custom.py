"""
Custom designed test functions on the sphere.

Several of these are evaluated directly in (theta, phi) rather than in
Cartesian coordinates, so they are not single-valued at the poles.
"""

import numpy as np

from sphcollection.core.geometry.spherical import dot, spherical_to_xyz
from sphcollection.core.precision import as_float, float_type
from sphcollection.functions.base import FunctionSource, Smoothness
from sphcollection.functions.registry import register_function

__all__ = [
    "cf_f1",
    "cf_f2",
    "cf_f3",
    "cf_f4",
    "cf_f5",
    "cf_f6",
    "cf_f7",
    "cf_f8",
    "cf_f9",
    "cf_f10",
    "cf_f11",
    "cf_f12",
    "cf_f13",
    "cf_f14",
    "cf_15",
]

_REFERENCE = "Custom designed functions, partially present in Vlnas et al. (2025)"


@register_function(
    source=FunctionSource.CUSTOM,
    smoothness=Smoothness.NON_SMOOTH,
    reference=_REFERENCE,
    bounds=(0.0, 2.0),
    description="|sin(cos(2 phi) - 2 theta)| + |cos(2 theta)|",
)
def cf_f1(theta, phi):
    theta, phi = as_float(theta, phi)
    F = float_type(theta)
    return np.abs(np.sin(np.cos(F(2.0) * phi) - F(2.0) * theta)) + np.abs(np.cos(F(2.0) * theta))


@register_function(
    source=FunctionSource.CUSTOM,
    smoothness=Smoothness.NON_SMOOTH,
    reference=_REFERENCE,
    bounds=(0.0, 2.0),
    description="|sin(2 phi - theta)| + |cos(2 theta)|",
)
def cf_f2(theta, phi):
    theta, phi = as_float(theta, phi)
    F = float_type(theta)
    return np.abs(np.sin(F(2.0) * phi - theta)) + np.abs(np.cos(F(2.0) * theta))


@register_function(
    source=FunctionSource.CUSTOM,
    reference=_REFERENCE,
    bounds=(0.8, 1.2),
    description="1 + sin(5 phi) / 5",
)
def cf_f3(theta, phi):
    # Depends on phi only; theta still decides the working precision and shape
    theta, phi = as_float(theta, phi, broadcast=True)
    F = float_type(phi)
    return F(1.0) + np.sin(F(5.0) * phi) / F(5.0)


@register_function(
    source=FunctionSource.CUSTOM,
    reference=_REFERENCE,
    bounds=(-0.2, 2.2),
    description="1 + cos(5 phi) / 5 + sin(5 theta)",
)
def cf_f4(theta, phi):
    theta, phi = as_float(theta, phi)
    F = float_type(theta)
    return F(1.0) + np.cos(F(5.0) * phi) / F(5.0) + np.sin(F(5.0) * theta)


@register_function(
    source=FunctionSource.CUSTOM,
    smoothness=Smoothness.NON_SMOOTH,
    reference=_REFERENCE,
    description=(
        "exp(2 p.(-1,-1,0.8)) + exp(1.5 p.(1,-1,0.8)) + exp(theta)"
        " + 10 exp(p.(0.8,0.3,-4) - 1) + 4 |cos(45 theta + 45 phi)|"
    ),
)
def cf_f5(theta, phi):
    theta, phi = as_float(theta, phi)
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    return (
        np.exp(F(2.0) * dot(x, y, z, F(-1.0), F(-1.0), F(0.8)))
        + np.exp(F(1.5) * dot(x, y, z, F(1.0), F(-1.0), F(0.8)))
        + np.exp(theta)
        + F(10.0) * np.exp(dot(x, y, z, F(0.8), F(0.3), F(-4.0)) - F(1.0))
        + F(4.0) * np.abs(np.cos(F(45.0) * theta + F(45.0) * phi))
    )


@register_function(
    source=FunctionSource.CUSTOM,
    reference=_REFERENCE,
    bounds=(0.2, 1.8),
    description="1 + 0.5 cos(theta) + 0.3 cos(2 phi)",
)
def cf_f6(theta, phi):
    theta, phi = as_float(theta, phi)
    F = float_type(theta)
    return F(1.0) + F(0.5) * np.cos(theta) + F(0.3) * np.cos(F(2.0) * phi)


@register_function(
    source=FunctionSource.CUSTOM,
    smoothness=Smoothness.NON_SMOOTH,
    reference=_REFERENCE,
    description="|cos(3x) + sin(2y) + 0.5 z^2|",
)
def cf_f7(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    return np.abs(np.cos(F(3.0) * x) + np.sin(F(2.0) * y) + F(0.5) * z * z)


@register_function(
    source=FunctionSource.CUSTOM,
    smoothness=Smoothness.NON_SMOOTH,
    reference=_REFERENCE,
    description="|sin(2x) cos(3y) + 0.5 z^2 + 0.3 sin(5x) cos(4z)|",
)
def cf_f8(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    return np.abs(
        np.sin(F(2.0) * x) * np.cos(F(3.0) * y)
        + F(0.5) * z * z
        + F(0.3) * np.sin(F(5.0) * x) * np.cos(F(4.0) * z)
    )


@register_function(
    source=FunctionSource.CUSTOM,
    smoothness=Smoothness.NON_SMOOTH,
    reference=_REFERENCE,
    description="|x^2 - y^2 + 0.5 xz - 0.3 yz|",
)
def cf_f9(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    return np.abs(x * x - y * y + F(0.5) * x * z - F(0.3) * y * z)


@register_function(
    source=FunctionSource.CUSTOM,
    reference=_REFERENCE,
    description="x^2 + y^2 + z^2 + 5 + 2.5 cos((theta - pi) / 2) sin(16 theta)",
)
def cf_f10(theta, phi):
    theta, phi = as_float(theta, phi)
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    return (
        x * x + y * y + z * z + F(5.0)
        + F(2.5) * np.cos((theta - F(np.pi)) / F(2.0)) * np.sin(F(16.0) * theta)
    )


@register_function(
    source=FunctionSource.CUSTOM,
    smoothness=Smoothness.NON_SMOOTH,
    reference=_REFERENCE,
    bounds=(0.0, 2.0),
    description="|sin(10x) cos(12y) sin(15z) + cos(20x)|",
)
def cf_f11(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    return np.abs(
        np.sin(F(10.0) * x) * np.cos(F(12.0) * y) * np.sin(F(15.0) * z) + np.cos(F(20.0) * x)
    )


@register_function(
    source=FunctionSource.CUSTOM,
    reference=_REFERENCE,
    bounds=(-0.2, 6.2),
    description="sin(10x) + cos(12y) - sin(15z) + 0.2 cos(18x) + 3",
)
def cf_f12(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    return (
        np.sin(F(10.0) * x) + np.cos(F(12.0) * y) - np.sin(F(15.0) * z)
        + F(0.2) * np.cos(F(18.0) * x) + F(3.0)
    )


@register_function(
    source=FunctionSource.CUSTOM,
    reference=_REFERENCE,
    description="exp(-sin(5x) - cos(6y)) + 0.3 sin(10z)",
)
def cf_f13(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    return np.exp(-np.sin(F(5.0) * x) - np.cos(F(6.0) * y)) + F(0.3) * np.sin(F(10.0) * z)


@register_function(
    source=FunctionSource.CUSTOM,
    reference=_REFERENCE,
    bounds=(-1.0, 1.0),
    description="exp(-2(x^2 + y^2)) sin(4z)",
)
def cf_f14(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    return np.exp(F(-2.0) * (x * x + y * y)) * np.sin(F(4.0) * z)


@register_function(
    source=FunctionSource.CUSTOM,
    reference=_REFERENCE,
    bounds=(0.0, 1.0),
    description="(x^2 + y^2) exp(-3 z^2)",
    aliases=("cf_f15",),
)
def cf_15(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    return (x * x + y * y) * np.exp(F(-3.0) * z * z)
