"""Pre-flight address validation.

Every public operation validates its addresses here before any key
derivation or network call is attempted.
"""

from __future__ import annotations

from alph_wallet.core.protocols import AddressChecker
from alph_wallet.exceptions import InvalidAddressError


class AddressValidator:
    """Synchronous, side-effect free address check.

    Parameters
    ----------
    checker:
        Any object satisfying the :class:`AddressChecker` protocol.
    """

    def __init__(self, checker: AddressChecker) -> None:
        self._checker: AddressChecker = checker

    def validate(self, address: object, field_name: str = "address") -> None:
        """Raise :class:`InvalidAddressError` unless *address* is usable.

        Checks run cheapest first and stop at the first failure:

        1. *address* is a non-empty ``str``.
        2. It has no leading or trailing whitespace.
        3. It passes the network format predicate.

        *field_name* is embedded in every message so callers can tell
        ``"address"`` apart from ``"destination address"``.
        """
        if not address or not isinstance(address, str):
            raise InvalidAddressError(
                f"Invalid {field_name}: address must be a non-empty string",
            )

        if address.strip() != address:
            raise InvalidAddressError(
                f"Invalid {field_name}: address contains leading or trailing whitespace",
            )

        if not self._checker.is_valid_address(address):
            raise InvalidAddressError(
                f"Invalid {field_name}: '{address}' is not a valid Alephium address",
            )
