"""Deterministic source that replays a fixed sequence of raw values.

Used to drive samplers through exact draw sequences: the same script always
produces the same outputs and the same rejections. Exhausting the script is
reported as :class:`~fair_range.exceptions.EntropyUnavailableError`, the same
way a real generator running dry would be.
"""

from __future__ import annotations

from collections.abc import Iterable

from fair_range.entropy.base import EntropySource
from fair_range.exceptions import EntropyUnavailableError


class ScriptedSource(EntropySource):
    """Replays *values* in order.

    ``get_random_bits(width)`` returns the next value as-is, so scripts are
    written in terms of raw draws. ``get_random_bytes(n)`` consumes *n*
    values, each of which must fit in a byte.

    Args:
        values: Raw draws to replay.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._position = 0

    @property
    def name(self) -> str:
        """Return ``'scripted'``."""
        return "scripted"

    @property
    def is_available(self) -> bool:
        """Whether any scripted values remain."""
        return self._position < len(self._values)

    @property
    def consumed(self) -> int:
        """Number of values handed out so far."""
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._values) - self._position

    def _next(self) -> int:
        if self._position >= len(self._values):
            raise EntropyUnavailableError(
                f"Scripted source exhausted after {len(self._values)} values"
            )
        value = self._values[self._position]
        self._position += 1
        return value

    def get_random_bits(self, width: int) -> int:
        """Return the next scripted value.

        Raises:
            ValueError: If the value does not fit in *width* bits.
            EntropyUnavailableError: If the script is exhausted.
        """
        value = self._next()
        if not 0 <= value < (1 << width):
            raise ValueError(f"Scripted value {value} does not fit in {width} bits")
        return value

    def get_random_bytes(self, n: int) -> bytes:
        """Return the next *n* scripted values as bytes.

        Raises:
            ValueError: If a value is outside ``[0, 255]``.
            EntropyUnavailableError: If the script is exhausted.
        """
        return bytes(self.get_random_bits(8) for _ in range(n))

    def rewind(self) -> None:
        """Restart the script from the first value."""
        self._position = 0

    def close(self) -> None:
        """No-op: no resources to release."""
