"""Random bit source registry with entry-point auto-discovery.

Built-in sources are registered at module import time via the
``@register_entropy_source`` decorator. Sources shipped by other packages
are discovered lazily on the first :meth:`EntropySourceRegistry.get` call
via the ``fair_range.entropy_sources`` entry-point group.
"""

from __future__ import annotations

import importlib.metadata
import inspect
import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from fair_range.config import FairRangeConfig
    from fair_range.entropy.base import EntropySource

logger = logging.getLogger("fair_range")

_ENTRY_POINT_GROUP = "fair_range.entropy_sources"


def _accepts_config(cls: type) -> bool:
    """Check whether a source constructor takes a config as its first argument.

    A parameter named ``config``, or one annotated with ``FairRangeConfig``,
    counts as accepting the config.
    """
    try:
        sig = inspect.signature(cls)
    except (ValueError, TypeError):
        return False

    for param in sig.parameters.values():
        annotation = param.annotation
        if param.name == "config":
            return True
        if isinstance(annotation, str):
            return "FairRangeConfig" in annotation
        return getattr(annotation, "__name__", "") == "FairRangeConfig"
    return False


class EntropySourceRegistry:
    """Registry for random bit source classes.

    Discovery chain:

    1. Built-in sources registered via ``@register_entropy_source``
    2. Third-party sources discovered via ``fair_range.entropy_sources``
       entry points (loaded lazily on first ``get()`` call)
    """

    _registry: ClassVar[dict[str, type[EntropySource]]] = {}
    _entry_points_loaded: ClassVar[bool] = False

    @classmethod
    def register(cls, name: str) -> Callable[[type[EntropySource]], type[EntropySource]]:
        """Decorator to register a source class under a string key.

        Args:
            name: Unique identifier for the source (e.g., ``'system'``).

        Returns:
            The original class, unmodified.

        Example::

            @EntropySourceRegistry.register("my_source")
            class MySource(EntropySource):
                ...
        """

        def decorator(source_cls: type[EntropySource]) -> type[EntropySource]:
            cls._registry[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[EntropySource]:
        """Look up a source class by name.

        Loads entry points on the first miss if not already loaded.

        Args:
            name: Registered identifier for the source.

        Returns:
            The source class (not an instance).

        Raises:
            KeyError: If *name* is not found after loading entry points.
        """
        if name in cls._registry:
            return cls._registry[name]

        if not cls._entry_points_loaded:
            cls._load_entry_points()
            if name in cls._registry:
                return cls._registry[name]

        available = ", ".join(sorted(cls._registry.keys())) or "(none)"
        raise KeyError(f"Unknown entropy source: {name!r}. Available: {available}")

    @classmethod
    def create(cls, name: str, config: FairRangeConfig) -> EntropySource:
        """Instantiate the source registered under *name*.

        A ``from_config`` classmethod on the source takes precedence.
        Otherwise the config is passed to the constructor only when it asks
        for one, so zero-argument sources such as ``SystemEntropySource``
        work too.

        Args:
            name: Registered identifier for the source.
            config: Active configuration.

        Returns:
            A ready-to-use source instance.
        """
        source_cls = cls.get(name)
        factory = getattr(source_cls, "from_config", None)
        if factory is not None:
            return factory(config)
        if _accepts_config(source_cls):
            return source_cls(config)  # type: ignore[call-arg]
        return source_cls()

    @classmethod
    def list_available(cls) -> list[str]:
        """Return all registered source names, sorted.

        Triggers entry-point loading if not yet done.
        """
        if not cls._entry_points_loaded:
            cls._load_entry_points()
        return sorted(cls._registry.keys())

    @classmethod
    def _load_entry_points(cls) -> None:
        """Discover and register sources from the entry-point group.

        Errors while loading an individual entry point are logged as
        warnings and do not prevent other sources from loading.
        """
        cls._entry_points_loaded = True
        try:
            eps = importlib.metadata.entry_points(group=_ENTRY_POINT_GROUP)
        except Exception:  # Intentional: must not crash on broken metadata
            logger.warning("Failed to load entry points for %s", _ENTRY_POINT_GROUP, exc_info=True)
            return

        for ep in eps:
            if ep.name in cls._registry:
                # Decorator registration wins over entry points.
                continue
            try:
                cls._registry[ep.name] = ep.load()
                logger.debug("Loaded entropy source %r from entry point", ep.name)
            except Exception:  # Intentional: one bad plugin must not block others
                logger.warning(
                    "Failed to load entropy source entry point %r: %s",
                    ep.name,
                    ep.value,
                    exc_info=True,
                )

    @classmethod
    def _reset(cls) -> None:
        """Reset registry state. Test-only."""
        cls._registry.clear()
        cls._entry_points_loaded = False


register_entropy_source = EntropySourceRegistry.register
