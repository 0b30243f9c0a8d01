"""Tests for RejectionSampler."""

from __future__ import annotations

import logging

import pytest

from fair_range.entropy.mock import MockUniformSource
from fair_range.entropy.scripted import ScriptedSource
from fair_range.entropy.system import SystemEntropySource
from fair_range.exceptions import (
    EntropyUnavailableError,
    InvalidRangeError,
    RetryLimitExceededError,
)
from fair_range.sampling.rejection import TRACE_LIMIT, RejectionSampler


class TestRejectionSampler:
    """Core behaviour of the unbiased sampler."""

    def test_name(self) -> None:
        assert RejectionSampler(SystemEntropySource()).name == "rejection"

    @pytest.mark.parametrize(("low", "high"), [(1, 6), (0, 1), (-10, 10), (0, 99), (7, 300)])
    def test_results_within_bounds(self, low: int, high: int) -> None:
        sampler = RejectionSampler(MockUniformSource(seed=11))
        for _ in range(500):
            assert low <= sampler.sample(low, high) <= high

    def test_huge_range(self) -> None:
        sampler = RejectionSampler(SystemEntropySource())
        for _ in range(50):
            assert 0 <= sampler.sample(0, 10**30) <= 10**30

    def test_accepted_draw_maps_by_remainder(self) -> None:
        sampler = RejectionSampler(ScriptedSource([4]))
        result = sampler.draw(1, 6)
        assert result.value == 5
        assert result.draws == 1
        assert result.rejections == 0
        assert result.width == 3
        assert result.limit == 6

    def test_rejects_values_at_or_above_limit(self) -> None:
        """3-bit die: 6 and 7 are redrawn."""
        sampler = RejectionSampler(ScriptedSource([7, 6, 2]))
        result = sampler.draw(1, 6)
        assert result.value == 3
        assert result.raw_values == (7, 6, 2)
        assert result.draws == 3
        assert result.rejections == 2

    def test_byte_width_die_threshold(self) -> None:
        """8-bit die: 252..255 rejected, 251 accepted."""
        sampler = RejectionSampler(ScriptedSource([252, 253, 254, 255, 251]), width=8)
        result = sampler.draw(1, 6)
        assert result.limit == 252
        assert result.rejections == 4
        assert result.value == 1 + 251 % 6

    def test_byte_width_die_maps_42_to_1(self) -> None:
        accepted = list(range(252))
        sampler = RejectionSampler(ScriptedSource(accepted), width=8)
        counts: dict[int, int] = {}
        for _ in accepted:
            value = sampler.sample(1, 6)
            counts[value] = counts.get(value, 0) + 1
        assert counts == {face: 42 for face in range(1, 7)}

    @pytest.mark.parametrize("size", [2, 4, 8, 16, 256, 1024])
    def test_power_of_two_never_rejects(self, size: int) -> None:
        sampler = RejectionSampler(MockUniformSource(seed=3))
        for _ in range(300):
            result = sampler.draw(0, size - 1)
            assert result.rejections == 0
            assert result.draws == 1

    def test_power_of_two_every_raw_value_accepted(self) -> None:
        sampler = RejectionSampler(ScriptedSource(range(8)))
        assert [sampler.sample(0, 7) for _ in range(8)] == list(range(8))

    def test_deterministic_replay(self) -> None:
        script = [7, 1, 6, 6, 0, 5, 3, 7, 2]
        first = RejectionSampler(ScriptedSource(script))
        second = RejectionSampler(ScriptedSource(script))
        a = [first.draw(1, 6) for _ in range(5)]
        b = [second.draw(1, 6) for _ in range(5)]
        assert a == b
        assert [r.value for r in a] == [2, 1, 6, 4, 3]
        assert [r.rejections for r in a] == [1, 2, 0, 0, 1]

    def test_single_value_range_ignores_source(self) -> None:
        source = ScriptedSource([])
        result = RejectionSampler(source).draw(42, 42)
        assert result.value == 42
        assert result.draws == 0
        assert source.consumed == 0

    def test_reversed_range_rejected(self) -> None:
        source = ScriptedSource([1])
        with pytest.raises(InvalidRangeError):
            RejectionSampler(source).sample(6, 1)
        assert source.consumed == 0

    def test_width_too_small_rejected(self) -> None:
        with pytest.raises(InvalidRangeError):
            RejectionSampler(SystemEntropySource(), width=2).sample(1, 6)

    def test_source_failure_propagates(self) -> None:
        sampler = RejectionSampler(ScriptedSource([7]))
        with pytest.raises(EntropyUnavailableError):
            sampler.sample(1, 6)

    def test_retry_cap(self) -> None:
        sampler = RejectionSampler(ScriptedSource([7, 6, 7, 1]), max_draws=3)
        with pytest.raises(RetryLimitExceededError, match="after 3 attempts"):
            sampler.sample(1, 6)

    def test_retry_cap_not_hit_when_accepted_in_time(self) -> None:
        sampler = RejectionSampler(ScriptedSource([7, 6, 1]), max_draws=3)
        assert sampler.sample(1, 6) == 2

    def test_long_rejection_run_uses_loop(self) -> None:
        """Thousands of consecutive rejections must not exhaust the stack."""
        script = [7] * 5000 + [0]
        result = RejectionSampler(ScriptedSource(script)).draw(1, 6)
        assert result.value == 1
        assert result.rejections == 5000

    def test_long_rejection_run_trace_is_bounded(self) -> None:
        script = [7] * (TRACE_LIMIT * 2) + [0]
        result = RejectionSampler(ScriptedSource(script)).draw(1, 6)
        assert result.draws == TRACE_LIMIT * 2 + 1
        assert len(result.raw_values) == TRACE_LIMIT
        assert result.raw_values == (7,) * TRACE_LIMIT

    def test_rejections_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        sampler = RejectionSampler(ScriptedSource([6, 0]))
        with caplog.at_level(logging.DEBUG, logger="fair_range"):
            sampler.sample(1, 6)
        assert any("Rejected raw draw 6" in r.message for r in caplog.records)

    @pytest.mark.parametrize(("kwargs"), [{"width": -1}, {"max_draws": 0}])
    def test_invalid_settings(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ValueError):
            RejectionSampler(SystemEntropySource(), **kwargs)
