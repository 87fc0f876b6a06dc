"""Core transfer service: orchestrates an ALPH transfer.

The pipeline is strictly ordered and every step is a potential early
exit:

1. Amount check (cheapest, caller controlled).
2. Destination address validation.
3. Signer derivation from the private key (local).
4. Unsigned transaction build (network).
5. Dry-run short circuit.
6. Signing (local).
7. Submission (network).

Adapter failures in steps 3, 4, 6 and 7 are wrapped as
:class:`~alph_wallet.exceptions.TransactionError` with the original
exception preserved as the cause.  Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any

from alph_wallet.core.models import BuildResult, DryRunResult, SignerIdentity, Wallet
from alph_wallet.core.protocols import KeyProvider, NodeProvider, NodeProviderFactory
from alph_wallet.core.validation import AddressValidator
from alph_wallet.exceptions import InvalidAmountError, TransactionError

logger = logging.getLogger(__name__)


class TransferService:
    """Stateless service that sends ALPH from a wallet to one destination.

    Parameters
    ----------
    node_factory:
        Returns a fresh node provider for each transfer.
    keys:
        Key derivation and signing primitives.
    validator:
        Address validator run before any key or network work.
    """

    def __init__(
        self,
        node_factory: NodeProviderFactory,
        keys: KeyProvider,
        validator: AddressValidator,
    ) -> None:
        self._node_factory: NodeProviderFactory = node_factory
        self._keys: KeyProvider = keys
        self._validator: AddressValidator = validator

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def send(
        self,
        wallet: Wallet,
        destination_address: str,
        amount: int,
        *,
        dry_run: bool = False,
    ) -> str | DryRunResult:
        """Send *amount* atto-ALPH from *wallet* to *destination_address*.

        Returns
        -------
        str | DryRunResult
            The submitted transaction id, or a :class:`DryRunResult`
            when *dry_run* is set.  A dry run builds the transaction
            but never signs or submits it.

        Raises
        ------
        InvalidAmountError
            If *amount* is not a positive integer.
        InvalidAddressError
            If *destination_address* fails validation.
        TransactionError
            If derivation, build, signing, or submission fails.
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidAmountError("Amount must be greater than zero")

        self._validator.validate(destination_address, "destination address")

        signer = self._derive_signer(wallet)
        node, built = self._build(signer, destination_address, amount)

        if dry_run:
            logger.debug("Dry run requested; not signing or submitting %s", built.tx_id)
            return DryRunResult(
                tx_id=built.tx_id,
                unsigned_tx=built.unsigned_tx,
                sender_address=signer.address,
                destination_address=destination_address,
                amount=amount,
            )

        signature = self._sign(built, wallet)
        return self._submit(node, built, signature)

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    def _derive_signer(self, wallet: Wallet) -> SignerIdentity:
        try:
            public_key = self._keys.public_key_from_private_key(wallet.private_key)
            address = self._keys.address_from_public_key(public_key)
        except Exception as exc:
            # The key itself must never reach the log.
            logger.debug("Signer derivation failed: %s", type(exc).__name__)
            raise TransactionError(
                "Failed to derive address from private key",
                exc,
            ) from exc
        return SignerIdentity(public_key=public_key, address=address)

    def _build(
        self,
        signer: SignerIdentity,
        destination_address: str,
        amount: int,
    ) -> tuple[NodeProvider, BuildResult]:
        """Build the transfer, returning the node handle for reuse on submit."""
        logger.debug(
            "Building transfer of %d atto-ALPH from %s to %s",
            amount,
            signer.address,
            destination_address,
        )
        try:
            node = self._node_factory()
            response = node.build_transfer_tx(
                signer_address=signer.address,
                public_key=signer.public_key,
                destinations=[
                    {"address": destination_address, "attoAlphAmount": str(amount)},
                ],
            )
            built = self._parse_build_result(response)
        except Exception as exc:
            logger.debug("Transaction build failed: %r", exc)
            raise TransactionError("Failed to build transaction", exc) from exc
        logger.debug("Built transaction %s", built.tx_id)
        return node, built

    def _sign(self, built: BuildResult, wallet: Wallet) -> str:
        try:
            return self._keys.sign(built.tx_id, wallet.private_key)
        except Exception as exc:
            logger.debug("Signing %s failed: %s", built.tx_id, type(exc).__name__)
            raise TransactionError("Failed to sign transaction", exc) from exc

    @staticmethod
    def _submit(node: NodeProvider, built: BuildResult, signature: str) -> str:
        try:
            response = node.submit_transaction(built.unsigned_tx, signature)
            tx_id = str(response["txId"])
        except Exception as exc:
            logger.debug("Submission of %s failed: %r", built.tx_id, exc)
            raise TransactionError("Failed to submit transaction", exc) from exc
        logger.debug("Submitted transaction %s", tx_id)
        return tx_id

    # ------------------------------------------------------------------
    # Raw-dict -> domain-model parser (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_build_result(response: dict[str, Any]) -> BuildResult:
        """Convert the builder's JSON body into a :class:`BuildResult`."""
        return BuildResult(
            tx_id=str(response["txId"]),
            unsigned_tx=str(response["unsignedTx"]),
        )
