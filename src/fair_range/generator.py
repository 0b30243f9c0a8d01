"""High-level entry point wiring config, source, sampler and logger together.

Typical use::

    from fair_range import FairRange

    with FairRange() as rng:
        rng.roll()                      # fair six-sided die
        rng.sample(10, 20)              # uniform in [10, 20]
        rng.sample(0, 99, overrides={"max_draws": 8})

The source is built from config (wrapped with a fallback unless
``fallback_mode='error'``) unless one is injected, in which case the caller
keeps ownership of it.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from fair_range.analysis.frequency import long_running_frequency
from fair_range.config import FairRangeConfig, resolve_config
from fair_range.entropy import EntropySourceRegistry, MockUniformSource, SystemEntropySource
from fair_range.entropy.fallback import FallbackEntropySource
from fair_range.exceptions import ConfigValidationError
from fair_range.logging.logger import SamplingLogger
from fair_range.logging.types import SampleRecord
from fair_range.sampling import SamplerRegistry

if TYPE_CHECKING:
    from types import TracebackType

    from fair_range.entropy.base import EntropySource
    from fair_range.sampling.base import BoundedSampler
    from fair_range.sampling.types import SampleResult

logger = logging.getLogger("fair_range")


def build_entropy_source(config: FairRangeConfig) -> EntropySource:
    """Build the source named by config, wrapping with fallback if needed.

    Args:
        config: Configuration specifying source type and fallback mode.

    Returns:
        An EntropySource, potentially wrapped in FallbackEntropySource.

    Raises:
        ConfigValidationError: If ``entropy_source_type`` names no
            registered source.
    """
    try:
        primary = EntropySourceRegistry.create(config.entropy_source_type, config)
    except KeyError as exc:
        raise ConfigValidationError(exc.args[0]) from exc

    if config.fallback_mode == "error":
        return primary

    fallback: EntropySource
    if config.fallback_mode == "system":
        fallback = SystemEntropySource()
    elif config.fallback_mode == "mock_uniform":
        fallback = MockUniformSource(seed=config.mock_seed)
    else:
        logger.warning(
            "Unknown fallback_mode %r, using system fallback",
            config.fallback_mode,
        )
        fallback = SystemEntropySource()

    return FallbackEntropySource(primary, fallback)


def _build_sampler(config: FairRangeConfig, source: EntropySource) -> BoundedSampler:
    try:
        return SamplerRegistry.build(config, source)
    except KeyError as exc:
        raise ConfigValidationError(exc.args[0]) from exc


class FairRange:
    """Unbiased bounded random integers with pluggable sources.

    Args:
        config: Configuration; loaded from the environment when ``None``.
        source: Random bit source to use instead of the configured one.
            An injected source is not closed by :meth:`close`.
    """

    def __init__(
        self,
        config: FairRangeConfig | None = None,
        source: EntropySource | None = None,
    ) -> None:
        self._config = config if config is not None else FairRangeConfig()
        self._owns_source = source is None
        self._source = source if source is not None else build_entropy_source(self._config)
        try:
            self._sampler = _build_sampler(self._config, self._source)
        except ConfigValidationError:
            if self._owns_source:
                self._source.close()
            raise
        self._logger = SamplingLogger(self._config)

        logger.info(
            "FairRange initialized: source=%s, method=%s, width=%s, max_draws=%s",
            self._source.name,
            self._sampler.name,
            self._sampler.width or "minimal",
            self._sampler.max_draws or "unbounded",
        )

    @property
    def config(self) -> FairRangeConfig:
        return self._config

    @property
    def source(self) -> EntropySource:
        return self._source

    @property
    def sampler(self) -> BoundedSampler:
        return self._sampler

    @property
    def sampling_logger(self) -> SamplingLogger:
        return self._logger

    def _resolve(
        self, overrides: dict[str, Any] | None
    ) -> tuple[FairRangeConfig, BoundedSampler]:
        config = resolve_config(self._config, overrides)
        if config is self._config:
            return config, self._sampler
        return config, _build_sampler(config, self._source)

    def _source_used(self, result: SampleResult) -> tuple[str, bool]:
        if result.draws == 0:
            return self._source.name, False
        if isinstance(self._source, FallbackEntropySource):
            return self._source.last_source_used, self._source.used_fallback
        return self._source.name, False

    def draw(
        self,
        low: int,
        high: int,
        overrides: dict[str, Any] | None = None,
    ) -> SampleResult:
        """Sample from ``[low, high]`` and return the full draw trace.

        Args:
            low: Inclusive lower bound.
            high: Inclusive upper bound.
            overrides: Per-call config overrides (bare field names).

        Raises:
            InvalidRangeError: If ``high < low`` or a bound is not an int.
            EntropyUnavailableError: If the source (and fallback) fail.
            RetryLimitExceededError: If a ``max_draws`` cap is exhausted.
            ConfigValidationError: If *overrides* are invalid.
        """
        config, sampler = self._resolve(overrides)

        t_start_ns = time.perf_counter_ns()
        result = sampler.draw(low, high)
        elapsed_ms = (time.perf_counter_ns() - t_start_ns) / 1_000_000

        source_used, is_fallback = self._source_used(result)
        record = SampleRecord(
            timestamp_ns=time.time_ns(),
            elapsed_ms=elapsed_ms,
            low=low,
            high=high,
            value=result.value,
            sampling_method=sampler.name,
            draws=result.draws,
            rejections=result.rejections,
            width=result.width,
            limit=result.limit,
            entropy_source_used=source_used,
            entropy_is_fallback=is_fallback,
        )
        self._logger.log_sample(record, config if overrides else None)
        return result

    def sample(
        self,
        low: int,
        high: int,
        overrides: dict[str, Any] | None = None,
    ) -> int:
        """Return a uniformly distributed integer in ``[low, high]``."""
        return self.draw(low, high, overrides).value

    def roll(self, sides: int = 6) -> int:
        """Roll a fair die with faces ``1..sides``."""
        return self.sample(1, sides)

    def frequency(
        self,
        low: int,
        high: int,
        trials: int,
        overrides: dict[str, Any] | None = None,
    ) -> dict[int, int]:
        """Count outcomes over *trials* samples of ``[low, high]``.

        Samples taken here bypass the per-sample logger.
        """
        _, sampler = self._resolve(overrides)
        return long_running_frequency(sampler, low, high, trials)

    def health_check(self) -> dict[str, Any]:
        """Return source health plus the active sampling method."""
        health = self._source.health_check()
        health["sampling_method"] = self._sampler.name
        return health

    def close(self) -> None:
        """Close the source if this instance built it."""
        if self._owns_source:
            self._source.close()

    def __enter__(self) -> FairRange:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
