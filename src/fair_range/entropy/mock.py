"""Seeded pseudorandom source for tests and reproducible demonstrations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from fair_range.entropy.base import EntropySource
from fair_range.entropy.registry import register_entropy_source

if TYPE_CHECKING:
    from fair_range.config import FairRangeConfig


@register_entropy_source("mock_uniform")
class MockUniformSource(EntropySource):
    """Uniform bytes from a numpy ``Generator``.

    Output is reproducible for a given *seed*. The generator is not
    thread-safe; give each thread its own instance.

    Args:
        seed: Optional RNG seed. ``None`` seeds from the OS.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @classmethod
    def from_config(cls, config: FairRangeConfig) -> MockUniformSource:
        """Build a source seeded with ``config.mock_seed``."""
        return cls(seed=config.mock_seed)

    @property
    def name(self) -> str:
        """Return ``'mock_uniform'``."""
        return "mock_uniform"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    @property
    def seed(self) -> int | None:
        return self._seed

    def get_random_bytes(self, n: int) -> bytes:
        """Draw *n* bytes uniformly from ``[0, 255]``."""
        return self._rng.integers(0, 256, size=n, dtype=np.uint8).tobytes()

    def close(self) -> None:
        """No-op: no resources to release."""
