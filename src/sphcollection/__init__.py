"""
sphcollection: a catalog of scalar test functions on the unit sphere.

This package provides named, reproducible benchmark functions f(theta, phi)
from the quadrature and interpolation literature, for testing how well a
quadrature rule or a fitted surface reproduces known functions on S².
"""

import logging

__version__ = "0.1.0"
__author__ = "sphcollection Contributors"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from sphcollection.functions import *  # noqa: E402,F401,F403
from sphcollection.functions import __all__ as _functions_all  # noqa: E402


# Lazy imports to keep configuration and logging helpers off the import path
def __getattr__(name: str):
    """Lazy import module attributes."""
    if name == "geometry":
        from sphcollection.core import geometry
        return geometry
    elif name == "Precision":
        from sphcollection.core.precision import Precision
        return Precision
    elif name == "Config":
        from sphcollection.config.schema import Config
        return Config
    elif name == "get_config":
        from sphcollection.config import get_config
        return get_config
    elif name == "set_config":
        from sphcollection.config import set_config
        return set_config
    elif name == "setup_logging":
        from sphcollection.utils.log import setup_logging
        return setup_logging
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "__version__",
    "geometry",
    "Precision",
    "Config",
    "get_config",
    "set_config",
    "setup_logging",
    *_functions_all,
]
