"""Registry for bounded sampler implementations.

Uses a decorator pattern for registration, so built-in and third-party
samplers register themselves at import time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from fair_range.config import FairRangeConfig
    from fair_range.entropy.base import EntropySource
    from fair_range.sampling.base import BoundedSampler


class SamplerRegistry:
    """Registry mapping string names to BoundedSampler classes.

    The ``build()`` class method instantiates the sampler named by the
    config's ``sampling_method`` field.
    """

    _registry: ClassVar[dict[str, type[BoundedSampler]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[BoundedSampler]], type[BoundedSampler]]:
        """Decorator that registers a BoundedSampler class under *name*.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[BoundedSampler]) -> type[BoundedSampler]:
            if name in cls._registry:
                raise ValueError(f"Sampler '{name}' is already registered")
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[BoundedSampler]:
        """Return the sampler class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown sampling method '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, config: FairRangeConfig, source: EntropySource) -> BoundedSampler:
        """Instantiate the sampler specified by ``config.sampling_method``."""
        klass = cls.get(config.sampling_method)
        return klass.from_config(config, source)

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered sampler names."""
        return sorted(cls._registry)
