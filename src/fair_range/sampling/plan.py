"""Rejection-sampling arithmetic.

Pure functions over integers: no randomness, no I/O. Given an inclusive
range ``[low, high]`` and a draw width ``w``, the acceptance region is
``[0, limit)`` where ``limit = floor(2**w / r) * r`` is the largest multiple
of the range size ``r`` not exceeding ``2**w``. Every accepted draw maps
onto exactly ``limit / r`` raw values per outcome.

With the minimal width, ``2**(w-1) < r <= 2**w``, so ``limit >= r > 2**(w-1)``
and the acceptance probability is always above one half.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from fair_range.exceptions import InvalidRangeError


def _require_int(name: str, value: object) -> int:
    # bool is an int subclass but never a meaningful bound.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRangeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def range_size(low: int, high: int) -> int:
    """Return ``high - low + 1`` for an inclusive range.

    Raises:
        InvalidRangeError: If a bound is not an int or ``high < low``.
    """
    low = _require_int("min", low)
    high = _require_int("max", high)
    if high < low:
        raise InvalidRangeError(f"max ({high}) must be >= min ({low})")
    return high - low + 1


def minimal_width(size: int) -> int:
    """Return the smallest ``w`` with ``2**w >= size``.

    ``minimal_width(1) == 0``, ``minimal_width(6) == 3``, ``minimal_width(8) == 3``.
    """
    if size < 1:
        raise InvalidRangeError(f"range size must be >= 1, got {size}")
    return (size - 1).bit_length()


def rejection_limit(size: int, width: int) -> int:
    """Return ``floor(2**width / size) * size``.

    Raises:
        InvalidRangeError: If ``2**width < size``.
    """
    span = 1 << width
    if span < size:
        raise InvalidRangeError(
            f"{width}-bit draws cannot cover a range of {size} values"
        )
    return (span // size) * size


@dataclass(frozen=True, slots=True)
class RejectionPlan:
    """Acceptance region for one range size and draw width.

    Attributes:
        range_size: Number of outcomes ``r``.
        width: Bits per raw draw ``w``.
        limit: Raw draws ``>= limit`` are rejected.
    """

    range_size: int
    width: int
    limit: int

    @classmethod
    def build(cls, size: int, width: int | None = None) -> RejectionPlan:
        """Plan draws for *size* outcomes.

        Args:
            size: Range size (>= 1).
            width: Fixed draw width, or ``None`` for the minimal width.

        Raises:
            InvalidRangeError: If *size* < 1, *width* is negative, or
                *width* is too narrow for *size*.
        """
        if size < 1:
            raise InvalidRangeError(f"range size must be >= 1, got {size}")
        if width is None:
            width = minimal_width(size)
        elif width < 0:
            raise InvalidRangeError(f"width must be >= 0, got {width}")
        return cls(range_size=size, width=width, limit=rejection_limit(size, width))

    @property
    def span(self) -> int:
        """Number of distinct raw draws, ``2**width``."""
        return 1 << self.width

    @property
    def rejected_values(self) -> int:
        """How many raw draws fall outside the acceptance region."""
        return self.span - self.limit

    @property
    def preimage_size(self) -> int:
        """Raw draws mapping onto each outcome once accepted."""
        return self.limit // self.range_size

    @property
    def acceptance_probability(self) -> Fraction:
        """Probability ``p = limit / 2**width`` that a draw is accepted."""
        return Fraction(self.limit, self.span)

    @property
    def expected_draws(self) -> Fraction:
        """Mean of the geometric draw count, ``1 / p``."""
        return 1 / self.acceptance_probability

    def tail_probability(self, k: int) -> Fraction:
        """Probability that more than *k* draws are needed, ``(1 - p)**k``."""
        if k < 0:
            raise ValueError(f"k must be >= 0, got {k}")
        return (1 - self.acceptance_probability) ** k

    def accepts(self, raw: int) -> bool:
        return raw < self.limit
