"""
Base resource implementation shared by node adapters.
"""

from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .http import HttpNodeApi


class NodeResource:
    """A queryable collection exposed by the node (delegates, votes, voters)"""

    def __init__(self, api: "HttpNodeApi", path: str):
        self.api = api
        self.path = path

    async def get(self, options: Optional[Dict[str, Any]] = None) -> Any:
        """Query the resource with the given options"""
        return await self.api.request("GET", self.path, params=options or None)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r})"


class TransactionsResource(NodeResource):
    """Transaction submission endpoint"""

    async def broadcast(self, signed_transaction: Any) -> Any:
        """Submit a signed transaction for network propagation"""
        return await self.api.request("POST", self.path, json=serialize_transaction(signed_transaction))


def serialize_transaction(signed_transaction: Any) -> Any:
    """Convert a signed transaction into a JSON-ready value"""
    if hasattr(signed_transaction, "model_dump"):
        return signed_transaction.model_dump(by_alias=True, exclude_none=True)
    if hasattr(signed_transaction, "to_dict"):
        return signed_transaction.to_dict()
    return signed_transaction
