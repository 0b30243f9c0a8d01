"""fair-range: uniformly distributed bounded integers without modulo bias.

Maps fixed-width random bits onto an inclusive integer range by rejection
sampling. Supports the OS CSPRNG, entropy device files, seeded generators,
and any user-supplied source registered through the
``fair_range.entropy_sources`` entry-point group.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fair-range")
except PackageNotFoundError:
    __version__ = "0.0.0"

from fair_range.config import FairRangeConfig, resolve_config, validate_overrides
from fair_range.exceptions import (
    ConfigValidationError,
    EntropyUnavailableError,
    FairRangeError,
    InvalidRangeError,
    RetryLimitExceededError,
)
from fair_range.generator import FairRange, build_entropy_source
from fair_range.sampling import ModuloSampler, RejectionPlan, RejectionSampler, SampleResult

__all__ = [
    "ConfigValidationError",
    "EntropyUnavailableError",
    "FairRange",
    "FairRangeConfig",
    "FairRangeError",
    "InvalidRangeError",
    "ModuloSampler",
    "RejectionPlan",
    "RejectionSampler",
    "RetryLimitExceededError",
    "SampleResult",
    "__version__",
    "build_entropy_source",
    "resolve_config",
    "validate_overrides",
]
