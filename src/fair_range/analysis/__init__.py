"""Frequency experiments and bias analysis."""

from fair_range.analysis.bias import modulo_bias, modulo_distribution
from fair_range.analysis.frequency import (
    GoodnessOfFit,
    chi_squared_uniformity,
    long_running_frequency,
)

__all__ = [
    "GoodnessOfFit",
    "chi_squared_uniformity",
    "long_running_frequency",
    "modulo_bias",
    "modulo_distribution",
]
