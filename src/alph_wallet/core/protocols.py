"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations, so the validation, ordering, and error-wrapping logic
can be exercised with substitutable fakes.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol


class AddressChecker(Protocol):
    """Contract for the network's address-format predicate."""

    def is_valid_address(self, address: str) -> bool:
        """Return ``True`` when *address* decodes to a known address type."""
        ...  # pragma: no cover


class KeyProvider(Protocol):
    """Contract for local key derivation and signing primitives.

    Implementations may raise any exception on malformed key material;
    the core wraps those into :class:`~alph_wallet.exceptions.TransactionError`.
    """

    def public_key_from_private_key(self, private_key: str) -> str:
        """Return the hex public key for a hex *private_key*."""
        ...  # pragma: no cover

    def address_from_public_key(self, public_key: str) -> str:
        """Return the address controlled by a hex *public_key*."""
        ...  # pragma: no cover

    def sign(self, tx_id: str, private_key: str) -> str:
        """Sign the hex transaction hash *tx_id* and return a hex signature."""
        ...  # pragma: no cover


class NodeProvider(Protocol):
    """Contract for the remote full-node HTTP API.

    Methods return the node's decoded JSON bodies unchanged; parsing into
    domain models is the core's job.  Any exception may be raised on
    transport or HTTP failure.
    """

    def get_address_balance(self, address: str) -> dict[str, Any]:
        """Return the balance document for *address*.

        The returned dict must contain at least ``"balance"``, the
        confirmed balance in atto-ALPH as a decimal string.
        """
        ...  # pragma: no cover

    def build_transfer_tx(
        self,
        *,
        signer_address: str,
        public_key: str,
        destinations: Sequence[dict[str, str]],
    ) -> dict[str, Any]:
        """Build an unsigned transfer and return ``{"txId", "unsignedTx", ...}``."""
        ...  # pragma: no cover

    def submit_transaction(self, unsigned_tx: str, signature: str) -> dict[str, Any]:
        """Submit a signed transaction and return ``{"txId", ...}``."""
        ...  # pragma: no cover


NodeProviderFactory = Callable[[], NodeProvider]
"""Zero-argument callable returning a fresh :class:`NodeProvider` per operation."""
