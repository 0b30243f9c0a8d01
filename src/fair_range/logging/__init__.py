"""Diagnostic logging subsystem for fair-range.

Provides immutable per-sample records and a configurable logger that
supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from fair_range.logging.logger import SamplingLogger
from fair_range.logging.types import SampleRecord

__all__ = [
    "SampleRecord",
    "SamplingLogger",
]
