"""Core / service layer: validation, orchestration, and error wrapping.

Rules
-----
* No ``print()`` calls.
* No direct network or cryptographic library use; everything external
  goes through the protocols in :mod:`alph_wallet.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from alph_wallet.core.balance_service import BalanceService
from alph_wallet.core.models import BuildResult, DryRunResult, SignerIdentity, Wallet
from alph_wallet.core.protocols import AddressChecker, KeyProvider, NodeProvider
from alph_wallet.core.transfer_service import TransferService
from alph_wallet.core.units import ONE_ALPH, alph_to_atto, format_alph
from alph_wallet.core.validation import AddressValidator

__all__: list[str] = [
    "ONE_ALPH",
    "AddressChecker",
    "AddressValidator",
    "BalanceService",
    "BuildResult",
    "DryRunResult",
    "KeyProvider",
    "NodeProvider",
    "SignerIdentity",
    "TransferService",
    "Wallet",
    "alph_to_atto",
    "format_alph",
]
