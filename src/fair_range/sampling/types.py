"""Data types for the sampling subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SampleResult:
    """Outcome of one bounded sample and the draws that produced it.

    Attributes:
        value: The returned integer, in ``[low, high]``.
        low: Inclusive lower bound.
        high: Inclusive upper bound.
        draws: Raw draws taken from the source (0 when ``low == high``).
        rejections: Draws discarded by rejection sampling.
        width: Bits per raw draw.
        limit: Rejection threshold in effect.
        raw_values: Raw draws in order, truncated to the first
            ``TRACE_LIMIT`` when a sample needs more draws than that.
    """

    value: int
    low: int
    high: int
    draws: int
    rejections: int
    width: int
    limit: int
    raw_values: tuple[int, ...]
