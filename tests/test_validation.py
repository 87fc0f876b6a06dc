"""Tests for AddressValidator (core/validation.py).

The format predicate is mocked so these tests pin down ordering: the
cheap local checks must reject bad input before the predicate is asked.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from alph_wallet.core.validation import AddressValidator
from alph_wallet.exceptions import InvalidAddressError

from _data import SENDER_ADDRESS


class TestShapeChecks:
    @pytest.mark.parametrize("value", ["", None, 42, b"1DrDy"])
    def test_non_string_or_empty_rejected(self, checker: MagicMock, value: object) -> None:
        validator = AddressValidator(checker)
        with pytest.raises(InvalidAddressError, match="address must be a non-empty string"):
            validator.validate(value)
        checker.is_valid_address.assert_not_called()

    @pytest.mark.parametrize(
        "value",
        [
            "  " + SENDER_ADDRESS,
            SENDER_ADDRESS + "  ",
            "\t" + SENDER_ADDRESS,
            SENDER_ADDRESS + "\n",
            "   ",
        ],
    )
    def test_surrounding_whitespace_rejected(self, checker: MagicMock, value: str) -> None:
        validator = AddressValidator(checker)
        with pytest.raises(
            InvalidAddressError,
            match="address contains leading or trailing whitespace",
        ):
            validator.validate(value)
        checker.is_valid_address.assert_not_called()


class TestFormatCheck:
    def test_valid_address_passes(self, checker: MagicMock) -> None:
        AddressValidator(checker).validate(SENDER_ADDRESS)
        checker.is_valid_address.assert_called_once_with(SENDER_ADDRESS)

    def test_predicate_rejection_names_value(self, checker: MagicMock) -> None:
        checker.is_valid_address.return_value = False
        with pytest.raises(InvalidAddressError) as exc_info:
            AddressValidator(checker).validate("invalid-address")
        assert str(exc_info.value) == (
            "Invalid address: 'invalid-address' is not a valid Alephium address"
        )


class TestFieldLabel:
    def test_default_label_is_address(self, checker: MagicMock) -> None:
        with pytest.raises(InvalidAddressError, match=r"^Invalid address: "):
            AddressValidator(checker).validate("")

    def test_custom_label_is_embedded(self, checker: MagicMock) -> None:
        checker.is_valid_address.return_value = False
        with pytest.raises(InvalidAddressError) as exc_info:
            AddressValidator(checker).validate("nope", "destination address")
        assert str(exc_info.value).startswith("Invalid destination address: 'nope'")

    def test_input_errors_carry_no_cause(self, checker: MagicMock) -> None:
        with pytest.raises(InvalidAddressError) as exc_info:
            AddressValidator(checker).validate("")
        assert exc_info.value.cause is None
