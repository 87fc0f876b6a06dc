"""Core balance service: validated balance lookups.

This service delegates the remote read to a
:class:`~alph_wallet.core.protocols.NodeProvider` created per call by an
injected factory.  It is responsible for:

* Validating the address before the provider is even constructed.
* Wrapping every provider failure as :class:`NetworkError`.
* Parsing the balance string into an exact ``int``.
"""

from __future__ import annotations

import logging
from typing import Any

from alph_wallet.core.protocols import NodeProviderFactory
from alph_wallet.core.validation import AddressValidator
from alph_wallet.exceptions import NetworkError

logger = logging.getLogger(__name__)


class BalanceService:
    """Stateless service answering "how much ALPH does this address hold?".

    Parameters
    ----------
    node_factory:
        Returns a fresh node provider for each lookup.
    validator:
        Address validator run before any network access.
    """

    def __init__(self, node_factory: NodeProviderFactory, validator: AddressValidator) -> None:
        self._node_factory: NodeProviderFactory = node_factory
        self._validator: AddressValidator = validator

    def get_balance(self, address: str) -> int:
        """Return the confirmed balance of *address* in atto-ALPH.

        Raises
        ------
        InvalidAddressError
            If *address* fails validation.  No network call is made.
        NetworkError
            If the node cannot be reached, rejects the request, or
            returns an unparseable balance.
        """
        self._validator.validate(address, "address")

        logger.debug("Fetching balance for %s", address)
        try:
            node = self._node_factory()
            response = node.get_address_balance(address)
        except Exception as exc:
            logger.debug("Balance fetch for %s failed: %r", address, exc)
            raise NetworkError(
                f"Failed to fetch balance for address: {address}",
                exc,
            ) from exc

        return self._parse_balance(address, response)

    @staticmethod
    def _parse_balance(address: str, response: dict[str, Any]) -> int:
        """Pull ``balance`` out of the node response as an exact integer."""
        try:
            raw = response["balance"]
            if isinstance(raw, bool) or not isinstance(raw, (str, int)):
                raise TypeError(f"unexpected balance type {type(raw).__name__}")
            return int(raw)
        except (KeyError, TypeError, ValueError) as exc:
            raise NetworkError(
                f"Unexpected balance response for address: {address}",
                exc,
            ) from exc
