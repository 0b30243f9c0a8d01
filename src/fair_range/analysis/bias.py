"""Exact distributions of the naive modulo mapping.

With ``2**w`` equally likely raw draws and ``r`` outcomes, ``x % r`` gives
offset ``i`` either ``ceil(2**w / r)`` or ``floor(2**w / r)`` preimages: the
first ``2**w mod r`` offsets get the extra one. The bias vanishes exactly
when ``r`` divides ``2**w``.
"""

from __future__ import annotations

from fractions import Fraction

from fair_range.sampling.plan import minimal_width, rejection_limit


def modulo_distribution(size: int, width: int | None = None) -> dict[int, Fraction]:
    """Return the exact probability of each offset under ``x % size``.

    Args:
        size: Range size (>= 1).
        width: Bits per raw draw; ``None`` uses the minimal width.

    Returns:
        Mapping of offset ``0..size-1`` to its probability.

    Raises:
        InvalidRangeError: If *size* < 1 or *width* is too narrow.
    """
    if width is None:
        width = minimal_width(size)
    rejection_limit(size, width)
    span = 1 << width
    base, extra = divmod(span, size)
    return {
        offset: Fraction(base + 1 if offset < extra else base, span)
        for offset in range(size)
    }


def modulo_bias(size: int, width: int | None = None) -> Fraction:
    """Gap between the most and least likely offsets under ``x % size``.

    >>> modulo_bias(6, 3)
    Fraction(1, 8)
    >>> modulo_bias(8, 3)
    Fraction(0, 1)
    """
    probabilities = modulo_distribution(size, width).values()
    return max(probabilities) - min(probabilities)
