"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SampleRecord:
    """Immutable record of a single bounded sample.

    Attributes:
        timestamp_ns: Wall-clock time of sampling (nanoseconds since epoch).
        elapsed_ms: Time spent drawing and mapping (milliseconds).
        low: Inclusive lower bound.
        high: Inclusive upper bound.
        value: Returned integer.
        sampling_method: Name of the sampler used.
        draws: Raw draws taken.
        rejections: Draws discarded.
        width: Bits per raw draw.
        limit: Rejection threshold.
        entropy_source_used: Name of the source that provided the last draw.
        entropy_is_fallback: True if a fallback source served the last draw.
    """

    timestamp_ns: int
    elapsed_ms: float

    low: int
    high: int
    value: int

    sampling_method: str
    draws: int
    rejections: int
    width: int
    limit: int

    entropy_source_used: str
    entropy_is_fallback: bool
