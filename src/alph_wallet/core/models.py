"""Domain models for alph-wallet.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies
on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Caller-owned key material
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Wallet:
    """A sender wallet for a single operation.

    The private key is excluded from ``repr`` so that it never ends up
    in logs or tracebacks by accident.
    """

    private_key: str = field(repr=False)
    """Hex-encoded secp256k1 private key (32 bytes)."""


@dataclass(frozen=True, slots=True)
class SignerIdentity:
    """Public identity derived from a :class:`Wallet`."""

    public_key: str
    """Hex-encoded compressed public key."""

    address: str
    """Base58 address controlled by the public key."""


# ---------------------------------------------------------------------------
# Transaction artifacts
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BuildResult:
    """Unsigned transfer produced by the node's transaction builder."""

    tx_id: str
    """Hash identifying the transaction; this is what gets signed."""

    unsigned_tx: str
    """Hex-serialised unsigned transaction."""


@dataclass(frozen=True, slots=True)
class DryRunResult:
    """Preview returned by a dry-run transfer instead of a tx id.

    Nothing described here has been signed or submitted.
    """

    tx_id: str
    unsigned_tx: str
    sender_address: str
    destination_address: str
    amount: int
    """Transfer amount in atto-ALPH."""
