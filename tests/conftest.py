"""Shared pytest fixtures and configuration for the alph-wallet test suite.

Guidelines
----------
* No internet access in any test.
* The node is faked at the protocol boundary (``MagicMock``) for core
  tests and with ``httpx.MockTransport`` for the HTTP adapter.
* Shared constants live in ``_data.py``.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from alph_wallet.core.models import Wallet
from alph_wallet.core.validation import AddressValidator

from _data import PRIVATE_KEY, PUBLIC_KEY, SENDER_ADDRESS, SIGNATURE, TX_ID, UNSIGNED_TX


@pytest.fixture
def checker() -> MagicMock:
    """AddressChecker that accepts every address."""
    fake = MagicMock()
    fake.is_valid_address.return_value = True
    return fake


@pytest.fixture
def validator(checker: MagicMock) -> AddressValidator:
    return AddressValidator(checker)


@pytest.fixture
def node() -> MagicMock:
    """NodeProvider answering every call successfully."""
    fake = MagicMock()
    fake.get_address_balance.return_value = {"balance": "0"}
    fake.build_transfer_tx.return_value = {"txId": TX_ID, "unsignedTx": UNSIGNED_TX}
    fake.submit_transaction.return_value = {"txId": TX_ID, "fromGroup": 0, "toGroup": 0}
    return fake


@pytest.fixture
def node_factory(node: MagicMock) -> MagicMock:
    return MagicMock(return_value=node)


@pytest.fixture
def keys() -> MagicMock:
    """KeyProvider with fixed derivation and signature results."""
    fake = MagicMock()
    fake.public_key_from_private_key.return_value = PUBLIC_KEY
    fake.address_from_public_key.return_value = SENDER_ADDRESS
    fake.sign.return_value = SIGNATURE
    return fake


@pytest.fixture
def wallet() -> Wallet:
    return Wallet(private_key=PRIVATE_KEY)
