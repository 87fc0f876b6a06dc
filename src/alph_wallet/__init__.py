"""alph-wallet: ALPH balance lookups and transfers for the Alephium network.

Validation runs before any network call and every failure surfaces as
a typed :class:`~alph_wallet.exceptions.AlephiumError`.
"""

from alph_wallet.api import get_alph_balance, send_alph
from alph_wallet.core.models import DryRunResult, Wallet
from alph_wallet.exceptions import (
    AlephiumError,
    InvalidAddressError,
    InvalidAmountError,
    NetworkError,
    TransactionError,
)
from alph_wallet.version import __version__

__all__: list[str] = [
    "AlephiumError",
    "DryRunResult",
    "InvalidAddressError",
    "InvalidAmountError",
    "NetworkError",
    "TransactionError",
    "Wallet",
    "__version__",
    "get_alph_balance",
    "send_alph",
]
