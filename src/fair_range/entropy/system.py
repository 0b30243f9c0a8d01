"""System random bit source using ``os.urandom()``.

This is the default source and the default fallback. It is
cryptographically secure, always available, and safe to share between
threads.
"""

from __future__ import annotations

import os

from fair_range.entropy.base import EntropySource
from fair_range.entropy.registry import register_entropy_source


@register_entropy_source("system")
class SystemEntropySource(EntropySource):
    """``os.urandom()`` wrapper: always available, cryptographically secure."""

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes from the OS CSPRNG."""
        return os.urandom(n)

    def close(self) -> None:
        """No-op: no resources to release."""
