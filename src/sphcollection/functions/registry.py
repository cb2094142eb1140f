"""
Function registry for lookup by name and plugin discovery.

This module provides a registry pattern for finding catalog functions by
name, supporting both the built-in catalog and third-party functions
advertised through entry points.
"""

from dataclasses import replace
from importlib.metadata import entry_points
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, TypeVar
import logging
import warnings

from sphcollection.core.precision import PrecisionLike
from sphcollection.functions.base import FunctionSource, Smoothness, SphericalFunction

__all__ = [
    "FunctionRegistry",
    "register_function",
    "get_function",
    "evaluate",
    "list_functions",
]

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class FunctionRegistry:
    """
    Registry of spherical test functions.

    The registry supports:
    - Built-in catalog functions registered via decorator
    - Third-party functions registered via entry_points
    - Runtime registration via register_callable()

    Example:
        >>> @FunctionRegistry.register("my_f1", source=FunctionSource.CUSTOM)
        ... def my_f1(theta, phi):
        ...     return 1.0 + 0.0 * theta
        >>>
        >>> float(FunctionRegistry.evaluate("my_f1", 0.3, 1.2))
        1.0
    """

    # Class-level storage
    _registry: Dict[str, SphericalFunction] = {}
    _aliases: Dict[str, str] = {}
    _entry_points_loaded: bool = False

    @classmethod
    def register(
        cls,
        name: Optional[str] = None,
        *,
        source: FunctionSource = FunctionSource.CUSTOM,
        smoothness: Smoothness = Smoothness.SMOOTH,
        reference: str = "",
        bounds: Optional[Tuple[float, float]] = None,
        description: str = "",
        aliases: Iterable[str] = (),
    ) -> Callable[[F], F]:
        """
        Decorator to register a function of (theta, phi).

        The decorated function is returned unchanged.

        Args:
            name: Name to register under (defaults to the function name)
            source: Literature source
            smoothness: Regularity class
            reference: Publication the function is taken from
            bounds: Range guaranteed by construction
            description: Closed-form definition in words
            aliases: Alternative lookup names

        Returns:
            Decorator function
        """

        def decorator(func: F) -> F:
            cls.register_callable(
                func,
                name=name,
                source=source,
                smoothness=smoothness,
                reference=reference,
                bounds=bounds,
                description=description,
                aliases=aliases,
            )
            return func

        return decorator

    @classmethod
    def register_callable(
        cls,
        func: Callable[[Any, Any], Any],
        name: Optional[str] = None,
        **metadata: Any,
    ) -> SphericalFunction:
        """Register a function directly and return its catalog entry."""
        register_name = (name or func.__name__).lower()
        aliases = tuple(alias.lower() for alias in metadata.pop("aliases", ()))

        entry = SphericalFunction(name=register_name, func=func, aliases=aliases, **metadata)
        return cls.register_entry(entry)

    @classmethod
    def register_entry(cls, entry: SphericalFunction, name: Optional[str] = None) -> SphericalFunction:
        """
        Register a ready-made catalog entry.

        Args:
            entry: Catalog entry to store
            name: Name to register under (defaults to ``entry.name``)

        Returns:
            The stored entry, renamed if ``name`` differs from ``entry.name``
        """
        register_name = (name or entry.name).lower()
        aliases = tuple(alias.lower() for alias in entry.aliases)
        if entry.name != register_name or entry.aliases != aliases:
            entry = replace(entry, name=register_name, aliases=aliases)

        existing = cls._registry.get(register_name)
        if existing is not None:
            if existing.func is not entry.func:
                logger.warning("Replacing registered function '%s'", register_name)
            cls._drop_aliases(register_name)

        cls._registry[register_name] = entry
        for alias in aliases:
            cls._aliases[alias] = register_name

        logger.debug("Registered function '%s' (%s)", register_name, entry.source.value)
        return entry

    @classmethod
    def _drop_aliases(cls, name: str) -> None:
        for alias in [a for a, target in cls._aliases.items() if target == name]:
            del cls._aliases[alias]

    @classmethod
    def _load_entry_points(cls) -> None:
        """Load functions from entry_points (third-party plugins)."""
        if cls._entry_points_loaded:
            return
        cls._entry_points_loaded = True

        from sphcollection.config import get_config

        registry_config = get_config().registry
        if not registry_config.load_entry_points:
            return

        try:
            eps = entry_points(group=registry_config.entry_point_group)
        except TypeError:
            eps = entry_points().get(registry_config.entry_point_group, [])

        for ep in eps:
            try:
                loaded = ep.load()
            except Exception as e:
                warnings.warn(
                    f"Failed to load function entry point '{ep.name}': {e}",
                    RuntimeWarning,
                )
                continue

            if isinstance(loaded, SphericalFunction):
                cls.register_entry(loaded, name=ep.name)
            else:
                cls.register_callable(loaded, name=ep.name, source=FunctionSource.EXTERNAL)
            logger.info("Loaded function '%s' from entry point", ep.name)

    @classmethod
    def _resolve(cls, name: str) -> str:
        name_lower = name.lower()
        return cls._aliases.get(name_lower, name_lower)

    @classmethod
    def get(cls, name: str) -> SphericalFunction:
        """
        Get a catalog entry by name.

        Args:
            name: Function name or alias (case-insensitive)

        Returns:
            Catalog entry

        Raises:
            KeyError: If the function is not found
        """
        cls._load_entry_points()

        resolved = cls._resolve(name)
        if resolved not in cls._registry:
            available = ", ".join(cls.list_available())
            raise KeyError(
                f"Function '{name}' not found. Available: {available or 'none'}"
            )

        return cls._registry[resolved]

    @classmethod
    def evaluate(
        cls,
        name: str,
        theta: Any,
        phi: Any,
        precision: Optional[PrecisionLike] = None,
    ) -> Any:
        """
        Evaluate a catalog function by name.

        Args:
            name: Function name or alias
            theta: Polar angle(s) in radians
            phi: Azimuthal angle(s) in radians
            precision: Working precision (default: inferred from the inputs)

        Returns:
            Function value(s)
        """
        return cls.get(name)(theta, phi, precision=precision)

    @classmethod
    def list_available(cls) -> List[str]:
        """List all registered function names."""
        cls._load_entry_points()
        return sorted(cls._registry.keys())

    @classmethod
    def list_by_source(cls, source: FunctionSource) -> List[str]:
        """List functions taken from a given literature source."""
        cls._load_entry_points()
        source = FunctionSource(source)
        return sorted(name for name, entry in cls._registry.items() if entry.source == source)

    @classmethod
    def list_by_smoothness(cls, smoothness: Smoothness) -> List[str]:
        """List functions with a given regularity class."""
        cls._load_entry_points()
        smoothness = Smoothness(smoothness)
        return sorted(
            name for name, entry in cls._registry.items() if entry.smoothness == smoothness
        )

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a function or alias is registered."""
        cls._load_entry_points()
        return cls._resolve(name) in cls._registry

    @classmethod
    def unregister(cls, name: str) -> bool:
        """Unregister a function together with its aliases."""
        resolved = cls._resolve(name)
        if resolved in cls._registry:
            del cls._registry[resolved]
            cls._drop_aliases(resolved)
            return True
        return False

    @classmethod
    def clear(cls) -> None:
        """Clear all registered functions."""
        cls._registry.clear()
        cls._aliases.clear()
        cls._entry_points_loaded = False

    @classmethod
    def get_multiple(cls, names: List[str]) -> List[SphericalFunction]:
        """Get multiple catalog entries."""
        return [cls.get(name) for name in names]


# Convenience decorator alias
register_function = FunctionRegistry.register


def get_function(name: str) -> SphericalFunction:
    """Convenience function to look up a catalog entry by name."""
    return FunctionRegistry.get(name)


def evaluate(name: str, theta: Any, phi: Any, precision: Optional[PrecisionLike] = None) -> Any:
    """Convenience function to evaluate a catalog function by name."""
    return FunctionRegistry.evaluate(name, theta, phi, precision=precision)


def list_functions() -> List[str]:
    """Convenience function listing all registered function names."""
    return FunctionRegistry.list_available()
