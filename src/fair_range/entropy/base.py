"""Abstract base class for all random bit sources.

Every source, whether the OS CSPRNG, an entropy device file, a seeded
generator, or a scripted test double, implements this interface. The ABC
provides a default ``get_random_bits()`` that delegates to
``get_random_bytes()`` and a concrete ``health_check()`` method. Subclasses
must implement the four abstract members: ``name``, ``is_available``,
``get_random_bytes()``, and ``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class EntropySource(ABC):
    """Abstract base for all random bit sources.

    Implementations must provide independent, uniformly distributed bytes
    on demand. Uniformity and independence are preconditions of every
    sampler in this package; no source is checked for bias.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'system'``, ``'device'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide entropy."""

    @abstractmethod
    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy.

        Raises:
            EntropyUnavailableError: If the source cannot provide bytes.
        """

    def get_random_bits(self, width: int) -> int:
        """Return a uniformly distributed integer in ``[0, 2**width)``.

        The default implementation reads ``ceil(width / 8)`` bytes, interprets
        them big-endian, and keeps the low *width* bits. Because every byte is
        uniform, the masked value is uniform over all ``width``-bit values.
        ``width == 0`` returns ``0`` without consuming the source.

        Args:
            width: Number of random bits (>= 0).

        Returns:
            An integer in ``[0, 2**width)``.

        Raises:
            ValueError: If *width* is negative.
            EntropyUnavailableError: If the source cannot provide bytes.
        """
        if width < 0:
            raise ValueError(f"width must be >= 0, got {width}")
        if width == 0:
            return 0
        raw = self.get_random_bytes((width + 7) // 8)
        return int.from_bytes(raw, "big") & ((1 << width) - 1)

    @abstractmethod
    def close(self) -> None:
        """Release resources (file handles, generator state)."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": self.is_available}
