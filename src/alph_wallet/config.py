"""Node endpoint configuration.

Each URL can be overridden with an environment variable; an empty
variable counts as unset.

- ``ALEPHIUM_MAINNET_NODE_URL``: node used for balance reads.
- ``ALEPHIUM_TESTNET_NODE_URL``: node used to build and submit transfers.
- ``ALEPHIUM_TESTNET_EXPLORER_URL``: explorer linked after a transfer.

The CLI additionally loads a ``.env`` file from the working directory
via python-dotenv before resolving these.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_MAINNET_NODE_URL = "https://node.mainnet.alephium.org"
DEFAULT_TESTNET_NODE_URL = "https://node.testnet.alephium.org"
DEFAULT_TESTNET_EXPLORER_URL = "https://testnet.alephium.org"

MAINNET_NODE_URL_ENV = "ALEPHIUM_MAINNET_NODE_URL"
TESTNET_NODE_URL_ENV = "ALEPHIUM_TESTNET_NODE_URL"
TESTNET_EXPLORER_URL_ENV = "ALEPHIUM_TESTNET_EXPLORER_URL"


@dataclass(frozen=True, slots=True)
class NodeConfig:
    """Resolved endpoints for one process or one call."""

    mainnet_node_url: str = DEFAULT_MAINNET_NODE_URL
    testnet_node_url: str = DEFAULT_TESTNET_NODE_URL
    testnet_explorer_url: str = DEFAULT_TESTNET_EXPLORER_URL

    def explorer_tx_url(self, tx_id: str) -> str:
        """Return the explorer page for a testnet transaction."""
        return f"{self.testnet_explorer_url.rstrip('/')}/transactions/{tx_id}"


def _env(environ: Mapping[str, str], name: str, default: str) -> str:
    return environ.get(name) or default


def load_config(environ: Mapping[str, str] | None = None) -> NodeConfig:
    """Resolve a :class:`NodeConfig` from *environ* (``os.environ`` by default)."""
    env = os.environ if environ is None else environ
    return NodeConfig(
        mainnet_node_url=_env(env, MAINNET_NODE_URL_ENV, DEFAULT_MAINNET_NODE_URL),
        testnet_node_url=_env(env, TESTNET_NODE_URL_ENV, DEFAULT_TESTNET_NODE_URL),
        testnet_explorer_url=_env(
            env, TESTNET_EXPLORER_URL_ENV, DEFAULT_TESTNET_EXPLORER_URL,
        ),
    )
