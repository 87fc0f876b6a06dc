"""Smoke tests: verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from alph_wallet import __version__
from alph_wallet.cli import exit_codes
from alph_wallet.exceptions import (
    AlephiumError,
    InvalidAddressError,
    InvalidAmountError,
    NetworkError,
    TransactionError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [InvalidAddressError, InvalidAmountError, NetworkError, TransactionError],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[AlephiumError]
    ) -> None:
        assert issubclass(exc_class, AlephiumError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(AlephiumError, Exception)

    @pytest.mark.parametrize(
        ("exc_class", "kind"),
        [
            (InvalidAddressError, "invalid_address"),
            (InvalidAmountError, "invalid_amount"),
            (NetworkError, "network"),
            (TransactionError, "transaction"),
        ],
    )
    def test_kind_discriminant(self, exc_class: type[AlephiumError], kind: str) -> None:
        assert exc_class("boom").kind == kind

    def test_hint_is_stored(self) -> None:
        err = AlephiumError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_and_cause_default_to_none(self) -> None:
        err = InvalidAmountError("boom")
        assert err.hint is None
        assert err.cause is None

    @pytest.mark.parametrize("exc_class", [NetworkError, TransactionError])
    def test_cause_is_stored_by_reference(self, exc_class: type[AlephiumError]) -> None:
        original = OSError("down")
        err = exc_class("wrapped", original)
        assert err.cause is original
        assert err.message == "wrapped"

    def test_default_messages(self) -> None:
        assert str(NetworkError()) == "Network operation failed"
        assert str(TransactionError()) == "Transaction operation failed"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130
