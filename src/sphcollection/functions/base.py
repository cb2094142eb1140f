"""
Base types for the spherical function catalog.

This module defines the metadata container wrapping each catalog function,
along with the enums used to organize the catalog.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol, Tuple, runtime_checkable

from sphcollection.core.precision import PrecisionLike, as_float

__all__ = [
    "FunctionSource",
    "Smoothness",
    "SphericalFunction",
    "SphericalFunctionProtocol",
]


class FunctionSource(str, Enum):
    """Literature source a catalog function was taken from."""

    FORNBERG = "fornberg"
    BEENTJES = "beentjes"
    RENKA = "renka"
    REEGAR = "reegar"
    BELLET = "bellet"
    FRANKE = "franke"
    CUSTOM = "custom"  # Custom designed functions
    EXTERNAL = "external"  # Registered through entry points


class Smoothness(str, Enum):
    """Regularity class of a function over the sphere."""

    SMOOTH = "smooth"  # Infinitely differentiable
    NON_SMOOTH = "non_smooth"  # Continuous with kinks (absolute values)
    DISCONTINUOUS = "discontinuous"  # Sign-based jumps


@runtime_checkable
class SphericalFunctionProtocol(Protocol):
    """
    Protocol for scalar functions on the unit sphere.

    Any callable object with a name and a (theta, phi) call signature can be
    used wherever a catalog entry is expected.
    """

    @property
    def name(self) -> str:
        """Return the function name."""
        ...

    def __call__(self, theta: Any, phi: Any) -> Any:
        """Evaluate the function at polar angle theta and azimuth phi."""
        ...


@dataclass(frozen=True)
class SphericalFunction:
    """
    A registered catalog function together with its metadata.

    Attributes:
        name: Canonical catalog name
        func: Plain function of (theta, phi)
        source: Literature source
        smoothness: Regularity class
        reference: Publication the function is taken from
        bounds: Closed (low, high) range guaranteed by construction, if known
        description: Closed-form definition in words
        aliases: Alternative lookup names
    """

    name: str
    func: Callable[[Any, Any], Any]
    source: FunctionSource = FunctionSource.CUSTOM
    smoothness: Smoothness = Smoothness.SMOOTH
    reference: str = ""
    bounds: Optional[Tuple[float, float]] = None
    description: str = ""
    aliases: Tuple[str, ...] = field(default_factory=tuple)

    def __call__(self, theta: Any, phi: Any, precision: Optional[PrecisionLike] = None) -> Any:
        """
        Evaluate the function.

        Args:
            theta: Polar angle(s) in radians
            phi: Azimuthal angle(s) in radians
            precision: Working precision (default: inferred from the inputs)

        Returns:
            Function value(s) in the working precision
        """
        theta, phi = as_float(theta, phi, precision=precision)
        return self.func(theta, phi)

    @property
    def is_discontinuous(self) -> bool:
        """Check if the function has jump discontinuities."""
        return self.smoothness == Smoothness.DISCONTINUOUS

    def to_dict(self) -> Dict[str, Any]:
        """Convert metadata to a dictionary for serialization."""
        return {
            "name": self.name,
            "source": self.source.value,
            "smoothness": self.smoothness.value,
            "reference": self.reference,
            "bounds": list(self.bounds) if self.bounds is not None else None,
            "description": self.description,
            "aliases": list(self.aliases),
        }
