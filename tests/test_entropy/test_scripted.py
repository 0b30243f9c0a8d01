"""Tests for ScriptedSource."""

from __future__ import annotations

import pytest

from fair_range.entropy.scripted import ScriptedSource
from fair_range.exceptions import EntropyUnavailableError


class TestScriptedSource:
    """Tests for the deterministic replay source."""

    def test_replays_values_in_order(self) -> None:
        source = ScriptedSource([5, 1, 7])
        assert [source.get_random_bits(3) for _ in range(3)] == [5, 1, 7]

    def test_exhaustion_raises_unavailable(self) -> None:
        source = ScriptedSource([0])
        source.get_random_bits(1)
        with pytest.raises(EntropyUnavailableError, match="exhausted"):
            source.get_random_bits(1)

    def test_value_wider_than_width_rejected(self) -> None:
        source = ScriptedSource([8])
        with pytest.raises(ValueError, match="does not fit"):
            source.get_random_bits(3)

    def test_bytes_consume_one_value_each(self) -> None:
        source = ScriptedSource([1, 2, 255])
        assert source.get_random_bytes(3) == b"\x01\x02\xff"
        assert source.consumed == 3

    def test_bytes_reject_values_over_255(self) -> None:
        with pytest.raises(ValueError):
            ScriptedSource([256]).get_random_bytes(1)

    def test_availability_tracks_remaining(self) -> None:
        source = ScriptedSource([3])
        assert source.is_available is True
        assert source.remaining == 1
        source.get_random_bits(2)
        assert source.is_available is False
        assert source.remaining == 0

    def test_rewind(self) -> None:
        source = ScriptedSource([4, 2])
        source.get_random_bits(3)
        source.rewind()
        assert source.get_random_bits(3) == 4

    def test_accepts_any_iterable(self) -> None:
        source = ScriptedSource(iter(range(3)))
        assert source.get_random_bytes(3) == b"\x00\x01\x02"
