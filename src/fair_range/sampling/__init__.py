"""Bounded integer sampling.

Importing this package registers the built-in ``'rejection'`` and
``'modulo'`` samplers with :class:`SamplerRegistry`.
"""

from fair_range.sampling.base import BoundedSampler
from fair_range.sampling.modulo import ModuloSampler
from fair_range.sampling.plan import RejectionPlan, minimal_width, range_size, rejection_limit
from fair_range.sampling.registry import SamplerRegistry
from fair_range.sampling.rejection import RejectionSampler
from fair_range.sampling.types import SampleResult

__all__ = [
    "BoundedSampler",
    "ModuloSampler",
    "RejectionPlan",
    "RejectionSampler",
    "SampleResult",
    "SamplerRegistry",
    "minimal_width",
    "range_size",
    "rejection_limit",
]
