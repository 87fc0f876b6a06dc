"""secp256k1 key handling backed by the ``ecdsa`` package.

Implements :class:`~alph_wallet.core.protocols.KeyProvider`:

* public keys are compressed SEC1 points (33 bytes, hex),
* signatures are deterministic (RFC 6979) ECDSA over the raw 32-byte
  transaction id, encoded as 64-byte ``r || s`` with low-S, hex.

Errors from malformed key material (bad hex, wrong length, out-of-range
scalar) propagate as raised; the core wraps them.
"""

from __future__ import annotations

import hashlib

from ecdsa import SECP256k1, SigningKey, VerifyingKey
from ecdsa.util import sigencode_string_canonize

from alph_wallet.infra.address import p2pkh_address

PRIVATE_KEY_LENGTH = 32
TX_ID_LENGTH = 32


def _decode_hex(value: str, expected_length: int, what: str) -> bytes:
    raw = bytes.fromhex(value)
    if len(raw) != expected_length:
        raise ValueError(f"{what} must be {expected_length} bytes, got {len(raw)}")
    return raw


def _signing_key(private_key: str) -> SigningKey:
    secret = _decode_hex(private_key, PRIVATE_KEY_LENGTH, "private key")
    return SigningKey.from_string(secret, curve=SECP256k1)


class Secp256k1KeyProvider:
    """Concrete :class:`KeyProvider` for the network's default key type."""

    def public_key_from_private_key(self, private_key: str) -> str:
        verifying_key = _signing_key(private_key).get_verifying_key()
        return verifying_key.to_string("compressed").hex()

    def address_from_public_key(self, public_key: str) -> str:
        # Round-trip through ecdsa so an off-curve key is rejected here.
        point = VerifyingKey.from_string(bytes.fromhex(public_key), curve=SECP256k1)
        return p2pkh_address(point.to_string("compressed"))

    def sign(self, tx_id: str, private_key: str) -> str:
        digest = _decode_hex(tx_id, TX_ID_LENGTH, "transaction id")
        signature: bytes = _signing_key(private_key).sign_digest_deterministic(
            digest,
            hashfunc=hashlib.sha256,
            sigencode=sigencode_string_canonize,
        )
        return signature.hex()
