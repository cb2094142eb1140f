"""
Floating-point precision handling.

Every catalog function works in the precision of its inputs: float32 angles
give float32 results, float64 angles give float64 results. Plain Python
numbers carry no precision of their own and follow the configured default.
"""

from enum import Enum
from typing import Any, Optional, Tuple, Type, Union
import numpy as np

__all__ = [
    "Precision",
    "PrecisionLike",
    "resolve_dtype",
    "as_float",
    "float_type",
]


class Precision(str, Enum):
    """Supported working precisions."""

    SINGLE = "float32"
    DOUBLE = "float64"

    @property
    def dtype(self) -> np.dtype:
        """Return the numpy dtype for this precision."""
        return np.dtype(self.value)

    @classmethod
    def parse(cls, value: Any) -> "Precision":
        """
        Parse a precision from a flexible specification.

        Args:
            value: Precision, numpy dtype or scalar type, or a name such as
                "float32", "single", "f4", "float64", "double", "f8"

        Returns:
            Matching Precision

        Raises:
            ValueError: If the value does not name a supported precision
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            key = value.strip().lower()
            if key in _ALIASES:
                return _ALIASES[key]
            raise ValueError(
                f"Unknown precision '{value}'. "
                f"Expected one of: {', '.join(sorted(_ALIASES))}"
            )

        try:
            dtype = np.dtype(value)
        except TypeError as e:
            raise ValueError(f"Unknown precision: {value!r}") from e

        for precision in cls:
            if precision.dtype == dtype:
                return precision
        raise ValueError(f"Unsupported precision dtype: {dtype}")


_ALIASES = {
    "float32": Precision.SINGLE,
    "single": Precision.SINGLE,
    "f4": Precision.SINGLE,
    "float64": Precision.DOUBLE,
    "double": Precision.DOUBLE,
    "f8": Precision.DOUBLE,
}

PrecisionLike = Union[Precision, str, np.dtype, Type[np.floating]]


def _default_dtype() -> np.dtype:
    from sphcollection.config import get_config

    return get_config().precision.default.dtype


def resolve_dtype(*values: Any, precision: Optional[PrecisionLike] = None) -> np.dtype:
    """
    Determine the working dtype for a set of inputs.

    Python ints and floats are weak: they never decide the precision on
    their own. Numpy scalars and arrays are promoted together.

    Args:
        *values: Inputs (Python numbers, numpy scalars or array-likes)
        precision: Explicit precision, overrides the inputs

    Returns:
        Floating numpy dtype
    """
    if precision is not None:
        return Precision.parse(precision).dtype

    dtypes = []
    for value in values:
        if isinstance(value, (np.generic, np.ndarray)):
            dtypes.append(value.dtype)
        elif isinstance(value, (bool, int, float)):
            continue
        else:
            dtypes.append(np.asarray(value).dtype)

    if not dtypes:
        return _default_dtype()

    dtype = np.result_type(*dtypes)
    if not np.issubdtype(dtype, np.floating):
        return _default_dtype()
    return dtype


def as_float(
    *values: Any,
    precision: Optional[PrecisionLike] = None,
    broadcast: bool = False,
) -> Tuple[Any, ...]:
    """
    Cast inputs to a common floating precision.

    0-d inputs become numpy scalars, everything else becomes an ndarray.

    Args:
        *values: Inputs to cast
        precision: Explicit precision (default: inferred from the inputs)
        broadcast: Broadcast array inputs against each other, so functions
            of a single angle still return the joint shape

    Returns:
        Tuple of cast values, in input order
    """
    dtype = resolve_dtype(*values, precision=precision)
    arrays = [np.asarray(value, dtype=dtype) for value in values]
    if broadcast and any(array.ndim > 0 for array in arrays):
        arrays = np.broadcast_arrays(*arrays)
    return tuple(array[()] if array.ndim == 0 else array for array in arrays)


def float_type(value: Any) -> Type[np.floating]:
    """Return the numpy scalar type of a floating value or array."""
    return np.asarray(value).dtype.type
