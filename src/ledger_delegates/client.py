"""
Delegate voting client: the surface a wallet uses to read delegate and vote
data and to submit vote and registration transactions.
"""

from typing import Any, Dict, List, Optional, Sequence

from .adapters import HttpNodeApi
from .config import NodeSettings
from .interfaces import INodeApi, ISigningService
from .pagination import PageAggregator
from .transactions import VoteTransactionFacade


class DelegateClient:
    """
    Wires a ledger node and a signing service into the read and write paths.

    Read operations return the node's response unmodified, except
    ``get_all_votes`` which returns the merged vote list. Write operations
    return the node's broadcast acknowledgement.
    """

    def __init__(self, node: INodeApi, signer: Optional[ISigningService] = None):
        self.node = node
        self.signer = signer
        self.pages = PageAggregator(node)

    @classmethod
    def from_settings(cls, signer: Optional[ISigningService] = None,
                      settings: Optional[NodeSettings] = None) -> "DelegateClient":
        """Create a client talking to the node configured in the environment"""
        return cls(HttpNodeApi.from_settings(settings), signer)

    async def list_delegates(self, options: Optional[Dict[str, Any]] = None) -> Any:
        return await self.pages.list_delegates(options)

    async def list_account_delegates(self, address: str) -> Any:
        return await self.pages.list_account_delegates(address)

    async def get_delegate(self, options: Dict[str, Any]) -> Any:
        return await self.pages.get_delegate(options)

    async def get_votes(self, options: Dict[str, Any]) -> Any:
        return await self.pages.get_votes(options)

    async def get_all_votes(self, address: str) -> List[Any]:
        return await self.pages.collect_all_votes(address)

    async def get_voters(self, public_key: str) -> Any:
        return await self.pages.fetch_delegate_voters(public_key)

    async def vote(self, passphrase: str, votes: Sequence[str], unvotes: Sequence[str],
                   second_passphrase: Optional[str] = None, time_offset: int = 0) -> Any:
        """Cast votes for and remove votes from delegates"""
        return await self.transactions.cast_vote(
            passphrase, votes, unvotes,
            second_passphrase=second_passphrase,
            time_offset=time_offset,
        )

    async def register_delegate(self, username: str, passphrase: str,
                                second_passphrase: Optional[str] = None,
                                time_offset: int = 0) -> Any:
        """Register the passphrase's account as a delegate named ``username``"""
        return await self.transactions.register_delegate(
            username, passphrase,
            second_passphrase=second_passphrase,
            time_offset=time_offset,
        )

    @property
    def transactions(self) -> VoteTransactionFacade:
        if self.signer is None:
            raise RuntimeError("DelegateClient was created without a signing service")
        return VoteTransactionFacade(self.node, self.signer)

    async def close(self) -> None:
        """Close the node connection if it supports closing"""
        close = getattr(self.node, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "DelegateClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
