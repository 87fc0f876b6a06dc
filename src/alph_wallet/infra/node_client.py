"""httpx backed implementation of :class:`~alph_wallet.core.protocols.NodeProvider`.

This module is the **only** place in the codebase that talks HTTP to an
Alephium full node.  Non-2xx responses are raised as
:class:`NodeApiError` carrying the node's ``detail`` text; transport
failures surface as ``httpx.HTTPError``.  The core layer wraps both
into domain errors.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)


class NodeApiError(Exception):
    """Raised when the node answers a request with a non-2xx status."""

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"Node returned HTTP {status_code}: {detail}")
        self.status_code: int = status_code
        self.detail: str = detail


class AlephiumNodeClient:
    """Concrete :class:`NodeProvider` for the full-node REST API.

    Usage::

        node = AlephiumNodeClient("https://node.testnet.alephium.org")
        node.get_address_balance("1DrDyTr9RpRsQnDnXo2YRiPzPW4ooHX5LLoqXrqfMrpQH")

    A short-lived ``httpx.Client`` is opened for every request unless
    one is supplied; a supplied client is used as-is and never closed.

    This class satisfies the :class:`~alph_wallet.core.protocols.NodeProvider`
    protocol structurally (no explicit inheritance required).
    """

    def __init__(self, base_url: str, *, client: httpx.Client | None = None) -> None:
        self.base_url: str = base_url.rstrip("/")
        self._client: httpx.Client | None = client

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def get_address_balance(self, address: str) -> dict[str, Any]:
        """``GET /addresses/{address}/balance``."""
        return self._request("GET", f"/addresses/{quote(address, safe='')}/balance")

    def build_transfer_tx(
        self,
        *,
        signer_address: str,
        public_key: str,
        destinations: Sequence[dict[str, str]],
    ) -> dict[str, Any]:
        """``POST /transactions/build``.

        The node derives the sender from ``fromPublicKey``; *signer_address*
        is only used for logging.
        """
        logger.debug("Requesting transfer build for signer %s", signer_address)
        return self._request(
            "POST",
            "/transactions/build",
            json={"fromPublicKey": public_key, "destinations": list(destinations)},
        )

    def submit_transaction(self, unsigned_tx: str, signature: str) -> dict[str, Any]:
        """``POST /transactions/submit``."""
        return self._request(
            "POST",
            "/transactions/submit",
            json={"unsignedTx": unsigned_tx, "signature": signature},
        )

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)

        if self._client is not None:
            response = self._client.request(method, url, json=json)
        else:
            with httpx.Client() as client:
                response = client.request(method, url, json=json)

        if response.is_error:
            raise NodeApiError(response.status_code, self._error_detail(response))

        body: Any = response.json()
        if not isinstance(body, dict):
            raise NodeApiError(
                response.status_code,
                f"expected a JSON object, got {type(body).__name__}",
            )
        return body

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        """Extract the node's ``detail`` message, falling back to raw text."""
        try:
            body: Any = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(body, dict) and body.get("detail"):
            return str(body["detail"])
        return response.text or response.reason_phrase
