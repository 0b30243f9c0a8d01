"""Tests for the exact modulo distribution helpers."""

from __future__ import annotations

from fractions import Fraction

import pytest

from fair_range.analysis.bias import modulo_bias, modulo_distribution
from fair_range.exceptions import InvalidRangeError


class TestModuloDistribution:
    def test_three_bit_die(self) -> None:
        assert modulo_distribution(6, 3) == {
            0: Fraction(2, 8),
            1: Fraction(2, 8),
            2: Fraction(1, 8),
            3: Fraction(1, 8),
            4: Fraction(1, 8),
            5: Fraction(1, 8),
        }

    def test_byte_die(self) -> None:
        dist = modulo_distribution(6, 8)
        assert dist[0] == Fraction(43, 256)
        assert dist[5] == Fraction(42, 256)

    def test_minimal_width_default(self) -> None:
        assert modulo_distribution(6) == modulo_distribution(6, 3)

    @pytest.mark.parametrize(("size", "width"), [(3, 2), (6, 8), (7, 16), (100, 7), (1, 0)])
    def test_sums_to_one(self, size: int, width: int) -> None:
        assert sum(modulo_distribution(size, width).values()) == 1

    def test_width_too_small(self) -> None:
        with pytest.raises(InvalidRangeError):
            modulo_distribution(6, 2)


class TestModuloBias:
    def test_biased_die(self) -> None:
        assert modulo_bias(6, 3) == Fraction(1, 8)

    def test_bias_shrinks_with_width(self) -> None:
        assert modulo_bias(6, 8) < modulo_bias(6, 3)
        assert modulo_bias(6, 8) == Fraction(1, 256)

    @pytest.mark.parametrize("size", [1, 2, 4, 8, 64])
    def test_no_bias_for_power_of_two(self, size: int) -> None:
        assert modulo_bias(size) == 0
