"""Infrastructure layer: external system integration.

This layer wraps all interaction with the full-node HTTP API, the
secp256k1 curve, and the base58 address codec.  It raises the
libraries' own exceptions (plus :class:`NodeApiError`); the core layer
turns those into :class:`~alph_wallet.exceptions.AlephiumError`
subclasses.

Rules
-----
* No imports from ``cli`` or ``core`` services.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from alph_wallet.infra.address import Base58AddressChecker, p2pkh_address
from alph_wallet.infra.keys import Secp256k1KeyProvider
from alph_wallet.infra.node_client import AlephiumNodeClient, NodeApiError

__all__: list[str] = [
    "AlephiumNodeClient",
    "Base58AddressChecker",
    "NodeApiError",
    "Secp256k1KeyProvider",
    "p2pkh_address",
]
