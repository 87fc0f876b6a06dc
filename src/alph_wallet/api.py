"""Library entry points wiring the core services to the real adapters.

``get_alph_balance`` reads from the mainnet node and ``send_alph``
transacts on the testnet node.  When no :class:`NodeConfig` is passed,
endpoints are resolved from the environment at the moment each
operation creates its node client.
"""

from __future__ import annotations

from alph_wallet.config import NodeConfig, load_config
from alph_wallet.core.balance_service import BalanceService
from alph_wallet.core.models import DryRunResult, Wallet
from alph_wallet.core.protocols import NodeProvider
from alph_wallet.core.transfer_service import TransferService
from alph_wallet.core.validation import AddressValidator
from alph_wallet.infra.address import Base58AddressChecker
from alph_wallet.infra.keys import Secp256k1KeyProvider
from alph_wallet.infra.node_client import AlephiumNodeClient


def _resolve(config: NodeConfig | None) -> NodeConfig:
    return config if config is not None else load_config()


def build_balance_service(config: NodeConfig | None = None) -> BalanceService:
    """Return a :class:`BalanceService` bound to the mainnet node."""

    def node_factory() -> NodeProvider:
        return AlephiumNodeClient(_resolve(config).mainnet_node_url)

    return BalanceService(node_factory, AddressValidator(Base58AddressChecker()))


def build_transfer_service(config: NodeConfig | None = None) -> TransferService:
    """Return a :class:`TransferService` bound to the testnet node."""

    def node_factory() -> NodeProvider:
        return AlephiumNodeClient(_resolve(config).testnet_node_url)

    return TransferService(
        node_factory,
        Secp256k1KeyProvider(),
        AddressValidator(Base58AddressChecker()),
    )


def get_alph_balance(address: str, *, config: NodeConfig | None = None) -> int:
    """Return the mainnet balance of *address* in atto-ALPH."""
    return build_balance_service(config).get_balance(address)


def send_alph(
    wallet: Wallet,
    destination_address: str,
    amount: int,
    *,
    dry_run: bool = False,
    config: NodeConfig | None = None,
) -> str | DryRunResult:
    """Send *amount* atto-ALPH on testnet; see :meth:`TransferService.send`."""
    return build_transfer_service(config).send(
        wallet, destination_address, amount, dry_run=dry_run,
    )
