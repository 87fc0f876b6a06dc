"""Alephium address encoding and format checks.

An address is the base58 encoding of a one-byte type tag followed by a
type-specific payload:

====  =======  =====================================================
Tag   Type     Payload
====  =======  =====================================================
0x00  P2PKH    blake2b-256 of the public key (32 bytes)
0x01  P2MPKH   compact ``n``, ``n`` key hashes, compact threshold ``m``
0x02  P2SH     blake2b-256 of the script (32 bytes)
0x03  P2C      contract id (32 bytes)
====  =======  =====================================================
"""

from __future__ import annotations

import hashlib

import base58

P2PKH = 0x00
P2MPKH = 0x01
P2SH = 0x02
P2C = 0x03

HASH_LENGTH = 32

# Compact integers whose top two bits are 00 fit in a single byte.
_SINGLE_BYTE_MODE_MASK = 0xC0
_SINGLE_BYTE_VALUE_MASK = 0x3F
_SINGLE_BYTE_SIGN_BIT = 0x20


def blake2b_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=HASH_LENGTH).digest()


def p2pkh_address(public_key: bytes) -> str:
    """Return the P2PKH address for a compressed public key."""
    return base58.b58encode(bytes([P2PKH]) + blake2b_256(public_key)).decode("ascii")


def _compact_small_int(byte: int) -> int | None:
    """Decode a single-byte compact signed int; ``None`` for other modes."""
    if byte & _SINGLE_BYTE_MODE_MASK:
        return None
    value = byte & _SINGLE_BYTE_VALUE_MASK
    if value & _SINGLE_BYTE_SIGN_BIT:
        value -= _SINGLE_BYTE_VALUE_MASK + 1
    return value


def _is_valid_multisig(payload: bytes) -> bool:
    if len(payload) < 2:
        return False
    n = _compact_small_int(payload[0])
    if n is None or n <= 0:
        return False
    expected_length = 1 + n * HASH_LENGTH + 1
    if len(payload) != expected_length:
        return False
    m = _compact_small_int(payload[-1])
    return m is not None and 0 < m <= n


class Base58AddressChecker:
    """Concrete :class:`~alph_wallet.core.protocols.AddressChecker`."""

    def is_valid_address(self, address: str) -> bool:
        try:
            decoded = base58.b58decode(address)
        except ValueError:
            return False
        if not decoded:
            return False

        address_type, payload = decoded[0], decoded[1:]
        if address_type in (P2PKH, P2SH, P2C):
            return len(payload) == HASH_LENGTH
        if address_type == P2MPKH:
            return _is_valid_multisig(payload)
        return False
