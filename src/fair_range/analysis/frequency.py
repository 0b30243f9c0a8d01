"""Long-running frequency experiments and goodness-of-fit testing.

Counters are plain ``dict[int, int]`` mappings created by the function that
fills them and returned to the caller; nothing here keeps global state.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy import stats

from fair_range.sampling.plan import range_size

if TYPE_CHECKING:
    from fair_range.sampling.base import BoundedSampler

logger = logging.getLogger("fair_range")


@dataclass(frozen=True, slots=True)
class GoodnessOfFit:
    """Pearson chi-squared test of observed counts against a uniform law.

    Attributes:
        statistic: Chi-squared statistic.
        p_value: Probability of a statistic at least this large under
            uniformity.
        degrees_of_freedom: Number of outcomes minus one.
        trials: Total number of observations.
    """

    statistic: float
    p_value: float
    degrees_of_freedom: int
    trials: int

    def is_uniform(self, alpha: float = 0.01) -> bool:
        """Whether uniformity survives at significance level *alpha*."""
        return self.p_value > alpha


def long_running_frequency(
    sampler: BoundedSampler,
    low: int,
    high: int,
    trials: int,
) -> dict[int, int]:
    """Sample ``[low, high]`` *trials* times and count each outcome.

    Every outcome in the range is present in the result, including those
    never drawn, and keys are in ascending order.

    Args:
        sampler: Sampler to exercise.
        low: Inclusive lower bound.
        high: Inclusive upper bound.
        trials: Number of samples to take (>= 0).

    Returns:
        Mapping of outcome to count.

    Raises:
        ValueError: If *trials* is negative.
        InvalidRangeError: If the range is invalid.
        EntropyUnavailableError: If the source fails; partial counts are
            discarded.
    """
    if trials < 0:
        raise ValueError(f"trials must be >= 0, got {trials}")
    range_size(low, high)
    frequency = dict.fromkeys(range(low, high + 1), 0)
    for _ in range(trials):
        frequency[sampler.sample(low, high)] += 1
    logger.debug(
        "Ran %d trials over [%d, %d] with %s sampler", trials, low, high, sampler.name
    )
    return frequency


def chi_squared_uniformity(counts: Mapping[int, int]) -> GoodnessOfFit:
    """Test *counts* against equal expected frequencies.

    Args:
        counts: Outcome -> count, one entry per possible outcome (zero
            counts included).

    Returns:
        GoodnessOfFit with the statistic and p-value from
        ``scipy.stats.chisquare``.

    Raises:
        ValueError: If fewer than two outcomes or no observations are given.
    """
    if len(counts) < 2:
        raise ValueError("chi-squared test needs at least two outcomes")
    observed = np.fromiter(counts.values(), dtype=np.float64, count=len(counts))
    total = int(observed.sum())
    if total == 0:
        raise ValueError("chi-squared test needs at least one observation")
    result = stats.chisquare(observed)
    return GoodnessOfFit(
        statistic=float(result.statistic),
        p_value=float(result.pvalue),
        degrees_of_freedom=len(counts) - 1,
        trials=total,
    )
