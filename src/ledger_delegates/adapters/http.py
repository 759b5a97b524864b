"""
HTTP ledger node adapter built on httpx.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ..config import NodeSettings, get_settings
from ..types import TransportError, NodeTimeoutError
from .base import NodeResource, TransactionsResource

logger = logging.getLogger(__name__)


class HttpNodeApi:
    """
    Remote ledger node reached over its REST API.

    Usage:
        async with HttpNodeApi("http://localhost:4000") as node:
            page = await node.votes.get({"address": "123L", "offset": 0, "limit": 100})
    """

    def __init__(self,
                 base_url: str,
                 api_prefix: str = "/api",
                 timeout: float = 30.0,
                 headers: Optional[Dict[str, str]] = None,
                 client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self.api_prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            headers=headers or {},
        )

        self.delegates = NodeResource(self, f"{self.api_prefix}/delegates")
        self.votes = NodeResource(self, f"{self.api_prefix}/votes")
        self.voters = NodeResource(self, f"{self.api_prefix}/voters")
        self.transactions = TransactionsResource(self, f"{self.api_prefix}/transactions")

    @classmethod
    def from_settings(cls, settings: Optional[NodeSettings] = None) -> "HttpNodeApi":
        """Create a node adapter from environment-driven settings"""
        settings = settings or get_settings()
        headers = {"User-Agent": settings.user_agent}
        if settings.nethash:
            headers["nethash"] = settings.nethash
        return cls(
            settings.node_url,
            api_prefix=settings.api_prefix,
            timeout=settings.timeout,
            headers=headers,
        )

    async def request(self, method: str, path: str, **kwargs) -> Any:
        """Make a request to the node and return the decoded body"""
        try:
            response = await self.client.request(method, path, **kwargs)
            response.raise_for_status()

        except httpx.TimeoutException as e:
            logger.error(f"Request {method} {path} to {self.base_url} timed out")
            raise NodeTimeoutError(f"Request to {self.base_url}{path} timed out") from e

        except httpx.HTTPStatusError as e:
            message = _error_message(e.response)
            logger.error(f"Node returned {e.response.status_code} for {method} {path}: {message}")
            raise TransportError(
                f"Node error {e.response.status_code} for {path}: {message}",
                status_code=e.response.status_code,
            ) from e

        except httpx.HTTPError as e:
            logger.error(f"Error calling node {self.base_url}: {e}")
            raise TransportError(f"Error calling node {self.base_url}: {e}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Node returned a non-JSON body for {method} {path}")
            raise TransportError(f"Node returned a non-JSON body for {path}") from e

    async def close(self) -> None:
        """Close the underlying HTTP client if this adapter created it"""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "HttpNodeApi":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(data, dict):
        return str(data.get("message") or data.get("error") or data)
    return str(data)
