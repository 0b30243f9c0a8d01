"""Fallback random bit source with transparent failover.

``FallbackEntropySource`` wraps a *primary* and a *fallback* source. When the
primary raises :class:`~fair_range.exceptions.EntropyUnavailableError`, the
wrapper delegates the same request to the fallback. All other exceptions
propagate unchanged: only unavailability is recoverable.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from fair_range.entropy.base import EntropySource
from fair_range.exceptions import EntropyUnavailableError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("fair_range")

_T = TypeVar("_T")


class FallbackEntropySource(EntropySource):
    """Tries the primary source, falls back on ``EntropyUnavailableError``.

    Both ``get_random_bytes()`` and ``get_random_bits()`` are forwarded, so a
    primary that overrides ``get_random_bits()`` keeps its behaviour.

    Args:
        primary: The preferred source.
        fallback: The source to use when the primary is unavailable.
    """

    def __init__(self, primary: EntropySource, fallback: EntropySource) -> None:
        self._primary = primary
        self._fallback = fallback
        self._last_source_used: str = primary.name
        self._fallback_count = 0
        self._used_fallback = False

    @property
    def name(self) -> str:
        """Return a compound name: ``'<primary>+<fallback>'``."""
        return f"{self._primary.name}+{self._fallback.name}"

    @property
    def is_available(self) -> bool:
        """Returns ``True`` if either the primary or fallback is available."""
        return self._primary.is_available or self._fallback.is_available

    @property
    def last_source_used(self) -> str:
        """Name of the source that served the most recent request."""
        return self._last_source_used

    @property
    def used_fallback(self) -> bool:
        """Whether the most recent request was served by the fallback."""
        return self._used_fallback

    @property
    def fallback_count(self) -> int:
        """Number of requests served by the fallback so far."""
        return self._fallback_count

    def _call(self, op: Callable[[EntropySource], _T]) -> _T:
        try:
            result = op(self._primary)
            self._last_source_used = self._primary.name
            self._used_fallback = False
            return result
        except EntropyUnavailableError:
            logger.warning(
                "Primary entropy source %r unavailable, falling back to %r",
                self._primary.name,
                self._fallback.name,
            )
            result = op(self._fallback)
            self._last_source_used = self._fallback.name
            self._used_fallback = True
            self._fallback_count += 1
            return result

    def get_random_bytes(self, n: int) -> bytes:
        """Fetch *n* bytes from the primary, or the fallback if unavailable.

        Raises:
            EntropyUnavailableError: If both primary and fallback fail.
        """
        return self._call(lambda source: source.get_random_bytes(n))

    def get_random_bits(self, width: int) -> int:
        """Fetch a *width*-bit value from the primary, or the fallback.

        Raises:
            EntropyUnavailableError: If both primary and fallback fail.
        """
        return self._call(lambda source: source.get_random_bits(width))

    def close(self) -> None:
        """Close both primary and fallback sources."""
        self._primary.close()
        self._fallback.close()

    def health_check(self) -> dict[str, Any]:
        """Return health status for both sources."""
        return {
            "source": self.name,
            "healthy": self.is_available,
            "primary": self._primary.health_check(),
            "fallback": self._fallback.health_check(),
            "last_source_used": self._last_source_used,
            "fallback_count": self._fallback_count,
        }
