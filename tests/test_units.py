"""Tests for ALPH / atto-ALPH conversion (core/units.py)."""

from __future__ import annotations

from decimal import Decimal

import pytest

from alph_wallet.core.units import ONE_ALPH, alph_to_atto, format_alph
from alph_wallet.exceptions import InvalidAmountError


class TestAlphToAtto:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1", ONE_ALPH),
            ("1.5", 1_500_000_000_000_000_000),
            ("0.000000000000000001", 1),
            ("123456789.123456789123456789", 123456789123456789123456789),
            (" 2 ", 2 * ONE_ALPH),
            ("1e-3", 10**15),
        ],
    )
    def test_exact_conversion(self, text: str, expected: int) -> None:
        assert alph_to_atto(text) == expected

    def test_digits_past_18_places_are_floored(self) -> None:
        assert alph_to_atto("0.0000000000000000019") == 1

    def test_below_one_atto_floors_to_zero(self) -> None:
        assert alph_to_atto("0.0000000000000000001") == 0

    def test_accepts_decimal(self) -> None:
        assert alph_to_atto(Decimal("0.25")) == ONE_ALPH // 4

    @pytest.mark.parametrize("text", ["0", "-1", "-0.5", "abc", "", "nan", "inf", "1,5"])
    def test_rejects_non_positive_or_non_numeric(self, text: str) -> None:
        with pytest.raises(InvalidAmountError):
            alph_to_atto(text)

    @pytest.mark.parametrize("text", ["1e100", "1e1000000", "1e999999999", str(2**256)])
    def test_rejects_amounts_beyond_u256(self, text: str) -> None:
        with pytest.raises(InvalidAmountError, match="too large") as exc_info:
            alph_to_atto(text)
        assert exc_info.value.hint is not None
        assert "largest amount" in exc_info.value.hint

    def test_largest_u256_amount_accepted(self) -> None:
        largest = format_alph(2**256 - 1)
        assert alph_to_atto(largest) == 2**256 - 1

    def test_tiny_exponent_floors_to_zero(self) -> None:
        assert alph_to_atto("1e-1000000000") == 0

    def test_long_fraction_is_floored_not_rounded(self) -> None:
        assert alph_to_atto("0." + "9" * 150) == ONE_ALPH - 1


class TestFormatAlph:
    @pytest.mark.parametrize(
        ("atto", "expected"),
        [
            (0, "0"),
            (ONE_ALPH, "1"),
            (10 * ONE_ALPH, "10"),
            (1_500_000_000_000_000_000, "1.5"),
            (1, "0.000000000000000001"),
            (123456789123456789123456789, "123456789.123456789123456789"),
        ],
    )
    def test_renders_exactly(self, atto: int, expected: str) -> None:
        assert format_alph(atto) == expected

    def test_negative(self) -> None:
        assert format_alph(-ONE_ALPH // 2) == "-0.5"
