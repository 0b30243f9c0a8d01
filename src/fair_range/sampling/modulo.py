"""Naive modulo mapping, kept as a biased baseline.

Takes one ``w``-bit draw and returns ``low + x % r`` unconditionally. When
``r`` does not divide ``2**w`` the low offsets receive one extra raw value
each, so they come up more often: a die rolled from 3 bits shows 1 and 2
with probability 2/8 and the other faces with 1/8. Use
:class:`~fair_range.sampling.rejection.RejectionSampler` for real work.
"""

from __future__ import annotations

from fair_range.sampling.base import BoundedSampler
from fair_range.sampling.registry import SamplerRegistry
from fair_range.sampling.types import SampleResult


@SamplerRegistry.register("modulo")
class ModuloSampler(BoundedSampler):
    """Single-draw ``x % r`` sampler. Biased unless ``r`` divides ``2**w``.

    ``max_draws`` is accepted for interface parity and has no effect: the
    sampler always takes exactly one draw.
    """

    @property
    def name(self) -> str:
        """Return ``'modulo'``."""
        return "modulo"

    def draw(self, low: int, high: int) -> SampleResult:
        """Map one raw draw onto ``[low, high]`` by remainder."""
        plan = self.plan(low, high)
        if plan.range_size == 1:
            return SampleResult(
                value=low,
                low=low,
                high=high,
                draws=0,
                rejections=0,
                width=plan.width,
                limit=plan.span,
                raw_values=(),
            )
        raw = self._source.get_random_bits(plan.width)
        return SampleResult(
            value=low + raw % plan.range_size,
            low=low,
            high=high,
            draws=1,
            rejections=0,
            width=plan.width,
            limit=plan.span,
            raw_values=(raw,),
        )
