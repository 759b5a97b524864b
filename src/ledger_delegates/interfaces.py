"""
Interfaces (protocols) for the ledger node and the signing service.
Using Python's Protocol for structural subtyping.
"""

from typing import Protocol, Dict, Any, Optional
from abc import abstractmethod


class IQueryResource(Protocol):
    """A node resource that answers ``get`` queries"""

    @abstractmethod
    async def get(self, options: Optional[Dict[str, Any]] = None) -> Any:
        """Query the resource with the given options"""
        ...


class ITransactionsResource(Protocol):
    """The node's transaction submission resource"""

    @abstractmethod
    async def broadcast(self, signed_transaction: Any) -> Any:
        """Submit a signed transaction for network propagation"""
        ...


class INodeApi(Protocol):
    """Interface for a remote ledger node"""

    delegates: IQueryResource
    votes: IQueryResource
    voters: IQueryResource
    transactions: ITransactionsResource


class ISigningService(Protocol):
    """Interface for building signed, broadcast-ready transactions"""

    @abstractmethod
    def cast_votes(self, params: Dict[str, Any]) -> Any:
        """Sign a vote/unvote transaction"""
        ...

    @abstractmethod
    def register_delegate(self, params: Dict[str, Any]) -> Any:
        """Sign a delegate registration transaction"""
        ...
