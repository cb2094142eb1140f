"""
Test functions on the sphere taken from the quadrature and interpolation
literature (Fornberg, Beentjes, Renka, Reegar, Bellet, Franke).

All functions take the polar angle theta and azimuthal angle phi and work
in the precision of their inputs. Literal constants are converted to that
precision through ``F = float_type(x)``.
"""

import numpy as np

from sphcollection.core.geometry.spherical import sign, spherical_to_xyz
from sphcollection.core.precision import as_float, float_type
from sphcollection.functions.base import FunctionSource, Smoothness
from sphcollection.functions.registry import register_function

__all__ = [
    "fornberg_f1",
    "fornberg_f4",
    "beentjes_f3",
    "beentjes_f4",
    "beentjes_f5",
    "renka_f3",
    "renka_f4",
    "renka_f5",
    "reegar_f2",
    "reegar_f3",
    "reegar_f4",
    "bellet_f4",
    "franke",
]

_FORNBERG = "On spherical harmonics based numerical quadrature over the surface of a sphere"
_BEENTJES = "Quadrature on a Spherical Surface"
_FRANKE = "Scattered Data Interpolation: Tests of Some Methods"
_REEGAR_SURFACES = "Numerical quadrature over smooth surfaces with boundaries"
_REEGAR_SPHERE = "Numerical Quadrature over the Surface of a Sphere"
_BELLET = "Spherical Harmonics Collocation: A Computational Intercomparison of Several Grids"


@register_function(
    source=FunctionSource.FORNBERG,
    reference=_FORNBERG,
    description="1 + x + y^2 + x^2 y + x^4 + y^5 + x^2 y^2 z^2",
)
def fornberg_f1(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    return F(1.0) + x + y * y + x * x * y + x * x * x * x + y * y * y * y * y + x * x * y * y * z * z


@register_function(
    source=FunctionSource.FORNBERG,
    reference=_FORNBERG,
    smoothness=Smoothness.DISCONTINUOUS,
    bounds=(0.0, 2.0 / 9.0),
    description="(1 + sign(-9x - 9y + 9z)) / 9",
)
def fornberg_f4(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    return (F(1.0) + F(sign(F(-9.0) * x - F(9.0) * y + F(9.0) * z))) / F(9.0)


@register_function(
    source=FunctionSource.BEENTJES,
    reference=_BEENTJES,
    bounds=(0.0, 2.0 / 9.0),
    description="(1 + tanh(-9x - 9y + 9z)) / 9",
)
def beentjes_f3(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    alpha = F(9.0)
    return (F(1.0) + np.tanh(-alpha * x - alpha * y + alpha * z)) / alpha


@register_function(
    source=FunctionSource.BEENTJES,
    reference=_BEENTJES,
    smoothness=Smoothness.DISCONTINUOUS,
    bounds=(0.0, 2.0 / 9.0),
    description="(1 - sign(x + y - z)) / 9",
)
def beentjes_f4(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    alpha = F(9.0)
    return (F(1.0) - F(sign(x + y - z))) / alpha


@register_function(
    source=FunctionSource.BEENTJES,
    reference=_BEENTJES,
    smoothness=Smoothness.DISCONTINUOUS,
    bounds=(0.0, 2.0 / 9.0),
    description="(1 - sign(pi x + y)) / 9",
)
def beentjes_f5(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    alpha = F(9.0)
    return (F(1.0) - F(sign(F(np.pi) * x + y))) / alpha


@register_function(
    source=FunctionSource.RENKA,
    smoothness=Smoothness.NON_SMOOTH,
    description="|(1.25 + cos(5.4y)) cos(6z) / (6 + 6(3x - 1)^2)|",
)
def renka_f3(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    t = F(3.0) * x - F(1.0)
    return np.abs((F(1.25) + np.cos(F(5.4) * y)) * np.cos(F(6.0) * z) / (F(6.0) + F(6.0) * t * t))


def _renka_gaussian(theta, phi, scale):
    # exp[-scale((X - .5)^2 + (Y - .5)^2 + (Z - .5)^2)]/3
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    half = F(0.5)
    r2 = np.square(x - half) + np.square(y - half) + np.square(z - half)
    return np.exp(-F(scale) * r2) / F(3.0)


@register_function(
    source=FunctionSource.RENKA,
    bounds=(0.0, 1.0 / 3.0),
    description="exp(-(81/16)((x - .5)^2 + (y - .5)^2 + (z - .5)^2)) / 3",
)
def renka_f4(theta, phi):
    return _renka_gaussian(theta, phi, 81.0 / 16.0)


@register_function(
    source=FunctionSource.RENKA,
    bounds=(0.0, 1.0 / 3.0),
    description="exp(-(81/4)((x - .5)^2 + (y - .5)^2 + (z - .5)^2)) / 3",
)
def renka_f5(theta, phi):
    return _renka_gaussian(theta, phi, 81.0 / 4.0)


@register_function(
    source=FunctionSource.REEGAR,
    reference=_REEGAR_SPHERE,
    bounds=(0.0, 1.0),
    description="(pi/2 + atan(300(z - 9999/10000))) / pi",
)
def reegar_f3(theta, phi):
    # z depends on theta only
    theta, phi = as_float(theta, phi, broadcast=True)
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(z)
    return (F(np.pi / 2.0) + np.arctan(F(300.0) * (z - F(9999.0) / F(10000.0)))) / F(np.pi)


@register_function(
    source=FunctionSource.BELLET,
    smoothness=Smoothness.DISCONTINUOUS,
    reference=_BELLET,
    bounds=(0.0, 1.0),
    description="0.5 (1 + sign(x - 0.5))",
)
def bellet_f4(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    return F(0.5) * (F(1.0) + F(sign(x - F(0.5))))


@register_function(
    source=FunctionSource.REEGAR,
    reference=_REEGAR_SURFACES,
    bounds=(-0.5, 0.5),
    description="(2/pi) atan(z)",
)
def reegar_f2(theta, phi):
    # z depends on theta only
    theta, phi = as_float(theta, phi, broadcast=True)
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(z)
    return F(2.0) / F(np.pi) * np.arctan(z)


@register_function(
    source=FunctionSource.REEGAR,
    reference=_REEGAR_SURFACES,
    bounds=(0.0, 1.0),
    description="0.5 + atan(1000(z - 9999/(10000 * 2 sqrt(2)))) / pi",
)
def reegar_f4(theta, phi):
    # z depends on theta only
    theta, phi = as_float(theta, phi, broadcast=True)
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(z)
    shift = F(9999.0) / (F(10000.0) * F(2.0) * np.sqrt(F(2.0)))
    return F(0.5) + np.arctan(F(1000.0) * (z - shift)) / F(np.pi)


@register_function(
    source=FunctionSource.FRANKE,
    reference=_FRANKE,
    description="Franke's four-Gaussian test function evaluated at (9x, 9y, 9z)",
)
def franke(theta, phi):
    x, y, z = spherical_to_xyz(theta, phi)
    F = float_type(x)
    x9, y9, z9 = F(9.0) * x, F(9.0) * y, F(9.0) * z

    term1 = F(0.75) * np.exp(
        -np.square(x9 - F(2.0)) / F(4.0)
        - np.square(y9 - F(2.0)) / F(4.0)
        - np.square(z9 - F(2.0)) / F(4.0)
    )
    term2 = F(0.75) * np.exp(
        -np.square(x9 + F(1.0)) / F(49.0)
        - (y9 + F(1.0)) / F(10.0)
        - (z9 + F(1.0)) / F(10.0)
    )
    term3 = F(0.5) * np.exp(
        -np.square(x9 - F(7.0)) / F(4.0)
        - np.square(y9 - F(3.0)) / F(4.0)
        - np.square(z9 - F(5.0)) / F(4.0)
    )
    term4 = F(0.2) * np.exp(
        -np.square(x9 - F(4.0))
        - np.square(y9 - F(7.0))
        - np.square(z9 - F(5.0))
    )
    return term1 + term2 + term3 - term4
