"""Diagnostic logger for per-sample events.

Uses the standard ``logging`` module with the ``"fair_range"`` logger.
Supports three verbosity levels and an in-memory diagnostic mode for
post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fair_range.config import FairRangeConfig
    from fair_range.logging.types import SampleRecord

logger = logging.getLogger("fair_range")


class SamplingLogger:
    """Per-sample diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per sample (range, value, draws,
        rejections, width, limit, source).

        ``"full"``: JSON dump of all record fields.
    """

    def __init__(self, config: FairRangeConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[SampleRecord] = []

    def log_sample(self, record: SampleRecord, config: FairRangeConfig | None = None) -> None:
        """Log a single sampling event.

        Args:
            record: Immutable record of the sample.
            config: Per-call config whose ``log_level`` and
                ``diagnostic_mode`` replace the defaults for this record.
        """
        log_level = self._log_level if config is None else config.log_level
        diagnostic_mode = self._diagnostic_mode if config is None else config.diagnostic_mode

        if diagnostic_mode:
            self._records.append(record)

        if log_level == "none":
            return

        if log_level == "summary":
            logger.info(
                "range=[%d, %d] value=%d method=%s draws=%d rejected=%d "
                "width=%d limit=%d source=%s%s elapsed=%.3fms",
                record.low,
                record.high,
                record.value,
                record.sampling_method,
                record.draws,
                record.rejections,
                record.width,
                record.limit,
                record.entropy_source_used,
                " [FALLBACK]" if record.entropy_is_fallback else "",
                record.elapsed_ms,
            )
        elif log_level == "full":
            logger.info("sample_record: %s", json.dumps(asdict(record)))

    def get_diagnostic_data(self) -> list[SampleRecord]:
        """Return all stored records (empty unless ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute aggregate statistics over stored records.

        Returns:
            Dictionary of aggregates, or an empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        total_draws = sum(r.draws for r in self._records)
        total_rejections = sum(r.rejections for r in self._records)
        fallback_count = sum(1 for r in self._records if r.entropy_is_fallback)
        elapsed = [r.elapsed_ms for r in self._records]
        return {
            "total_samples": n,
            "total_draws": total_draws,
            "total_rejections": total_rejections,
            "mean_draws": total_draws / n,
            "rejection_rate": total_rejections / total_draws if total_draws else 0.0,
            "mean_elapsed_ms": sum(elapsed) / n,
            "max_elapsed_ms": max(elapsed),
            "fallback_count": fallback_count,
            "fallback_rate": fallback_count / n,
        }
