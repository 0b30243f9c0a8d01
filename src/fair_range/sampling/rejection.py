"""Unbiased bounded sampling by rejection.

Algorithm, for range size ``r = high - low + 1``:
    1. Pick the draw width ``w`` (smallest with ``2**w >= r`` unless fixed).
    2. ``limit = floor(2**w / r) * r``.
    3. Draw a ``w``-bit value ``x``; while ``x >= limit`` discard and redraw.
    4. Return ``low + x % r``.

Accepted draws are uniform over ``[0, limit)`` and ``limit`` is a multiple of
``r``, so ``x % r`` is exactly uniform. The draw count is geometric with
success probability ``limit / 2**w`` (above one half for the minimal width),
so fewer than two draws are needed on average.
"""

from __future__ import annotations

import logging

from fair_range.exceptions import RetryLimitExceededError
from fair_range.sampling.base import BoundedSampler
from fair_range.sampling.registry import SamplerRegistry
from fair_range.sampling.types import SampleResult

logger = logging.getLogger("fair_range")

# Raw draws kept in SampleResult.raw_values; later draws are only counted.
TRACE_LIMIT = 64


@SamplerRegistry.register("rejection")
class RejectionSampler(BoundedSampler):
    """Uniform integers in an inclusive range, free of modulo bias.

    Example with a six-sided die and fixed 8-bit draws::

        sampler = RejectionSampler(source, width=8)
        sampler.plan(1, 6).limit   # 252: raw draws 252..255 are redrawn
        sampler.sample(1, 6)       # each face backed by 42 raw values
    """

    @property
    def name(self) -> str:
        """Return ``'rejection'``."""
        return "rejection"

    def draw(self, low: int, high: int) -> SampleResult:
        """Sample from ``[low, high]`` by rejection.

        A single-value range returns *low* without touching the source.
        Only the first ``TRACE_LIMIT`` raw draws are kept in the trace, so a
        long rejection run costs constant memory.

        Raises:
            InvalidRangeError: If the range is invalid.
            EntropyUnavailableError: If the source fails mid-sample.
            RetryLimitExceededError: If ``max_draws`` draws are all rejected.
        """
        plan = self.plan(low, high)
        if plan.range_size == 1:
            return SampleResult(
                value=low,
                low=low,
                high=high,
                draws=0,
                rejections=0,
                width=plan.width,
                limit=plan.limit,
                raw_values=(),
            )

        raw_values: list[int] = []
        draws = 0
        while True:
            if self._max_draws is not None and draws >= self._max_draws:
                raise RetryLimitExceededError(
                    f"No draw accepted for range [{low}, {high}] after "
                    f"{self._max_draws} attempts (limit={plan.limit}, width={plan.width})"
                )
            raw = self._source.get_random_bits(plan.width)
            draws += 1
            if len(raw_values) < TRACE_LIMIT:
                raw_values.append(raw)
            if plan.accepts(raw):
                break
            logger.debug(
                "Rejected raw draw %d >= limit %d for range [%d, %d]",
                raw,
                plan.limit,
                low,
                high,
            )

        return SampleResult(
            value=low + raw % plan.range_size,
            low=low,
            high=high,
            draws=draws,
            rejections=draws - 1,
            width=plan.width,
            limit=plan.limit,
            raw_values=tuple(raw_values),
        )
