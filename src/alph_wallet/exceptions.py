"""Custom exception hierarchy for alph-wallet.

All exceptions that cross the core boundary must inherit from
:class:`AlephiumError`.  Raw adapter exceptions (HTTP errors, key
decoding failures, signing errors) are caught by the core services and
re-raised as a typed subclass defined here, with the original exception
kept both as ``cause`` and as ``__cause__``.

Hierarchy
---------
AlephiumError
├── InvalidAddressError
├── InvalidAmountError
├── NetworkError
└── TransactionError
"""

from __future__ import annotations

from typing import ClassVar


class AlephiumError(Exception):
    """Base exception for all alph-wallet errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    kind: ClassVar[str] = "alephium"
    """Discriminant used by callers that dispatch on error kind."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""
        self.cause: BaseException | None = cause
        """The lower-level failure that triggered this error, if any."""


# --- Caller input ----------------------------------------------------------

class InvalidAddressError(AlephiumError):
    """Raised when an address fails pre-flight validation."""

    kind = "invalid_address"


class InvalidAmountError(AlephiumError):
    """Raised when an amount is zero, negative, or not an integer."""

    kind = "invalid_amount"


# --- Remote failures -------------------------------------------------------

class NetworkError(AlephiumError):
    """Raised when a read from the node fails."""

    kind = "network"

    def __init__(
        self,
        message: str = "Network operation failed",
        cause: BaseException | None = None,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint, cause=cause)


class TransactionError(AlephiumError):
    """Raised when building, signing, or submitting a transaction fails."""

    kind = "transaction"

    def __init__(
        self,
        message: str = "Transaction operation failed",
        cause: BaseException | None = None,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint, cause=cause)
