"""
Catalog of scalar test functions on the unit sphere.

This package provides reference integrands for benchmarking quadrature and
interpolation schemes on S², grouped by literature source:

Modules:
    - literature: Fornberg, Beentjes, Renka, Reegar, Bellet and Franke functions
    - custom: Custom designed functions cf_f1 .. cf_f14 and cf_15

Every function takes (theta, phi) and returns a value in the precision of
its inputs.
"""

from sphcollection.functions.base import (
    FunctionSource,
    Smoothness,
    SphericalFunction,
    SphericalFunctionProtocol,
)
from sphcollection.functions.registry import (
    FunctionRegistry,
    register_function,
    get_function,
    evaluate,
    list_functions,
)
from sphcollection.functions.literature import (
    fornberg_f1,
    fornberg_f4,
    beentjes_f3,
    beentjes_f4,
    beentjes_f5,
    renka_f3,
    renka_f4,
    renka_f5,
    reegar_f2,
    reegar_f3,
    reegar_f4,
    bellet_f4,
    franke,
)
from sphcollection.functions.custom import (
    cf_f1,
    cf_f2,
    cf_f3,
    cf_f4,
    cf_f5,
    cf_f6,
    cf_f7,
    cf_f8,
    cf_f9,
    cf_f10,
    cf_f11,
    cf_f12,
    cf_f13,
    cf_f14,
    cf_15,
)

__all__ = [
    # Base classes
    "FunctionSource",
    "Smoothness",
    "SphericalFunction",
    "SphericalFunctionProtocol",
    # Registry
    "FunctionRegistry",
    "register_function",
    "get_function",
    "evaluate",
    "list_functions",
    # Literature
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
    # Custom
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
