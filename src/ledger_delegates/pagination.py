"""
Read-side queries against a ledger node, including the two-step vote
page aggregation.
"""

import logging
from typing import Any, Dict, List, Optional

from .interfaces import INodeApi
from .models import VoteUsageReport, merge_pages
from .types import MAX_PAGE_SIZE, ACCOUNT_DELEGATES_LIMIT, ProtocolInvariantViolation
from .utils import normalize_limit, page_query, query_options, require_identifier

logger = logging.getLogger(__name__)


class PageAggregator:
    """
    Collects an address's votes while hiding the node's page-size limit.

    The node reports the real vote count (``votesUsed``) with every page, so
    the collection is a fixed probe-then-fetch sequence:

    1. fetch ``offset=0, limit=100``;
    2. if ``votesUsed`` exceeds the page size, fetch one more page with
       ``offset=100, limit=votesUsed - 100``.

    The second request depends on the first response and is never issued
    before it completes. Nothing is retried and no partial list is ever
    returned.
    """

    def __init__(self, node: INodeApi, page_size: int = MAX_PAGE_SIZE):
        self.node = node
        self.page_size = normalize_limit(page_size)

    async def collect_all_votes(self, address: str) -> List[Any]:
        """Return every vote cast by ``address`` in node order"""
        require_identifier(address, "address")

        first = await self._fetch_page(address, offset=0, limit=self.page_size)
        if first.votes_used <= self.page_size:
            return list(first.votes)

        remainder = first.votes_used - self.page_size
        logger.debug(f"Address {address} has {first.votes_used} votes, fetching {remainder} more")
        second = await self._fetch_page(address, offset=self.page_size, limit=remainder)
        if not second.votes:
            raise ProtocolInvariantViolation(
                f"Node reported {first.votes_used} votes for {address} "
                f"but returned an empty continuation page"
            )

        merged = merge_pages([first, second])
        if len(merged) != first.votes_used or second.votes_used != first.votes_used:
            # votesUsed may have changed between the two calls
            logger.warning(
                f"Collected {len(merged)} votes for {address}, node reported "
                f"{first.votes_used} then {second.votes_used}"
            )
        return merged

    async def fetch_delegate_voters(self, public_key: str) -> Any:
        """Return the node's voter listing for a delegate"""
        return await self.node.voters.get({"publicKey": public_key})

    async def list_delegates(self, options: Optional[Dict[str, Any]] = None) -> Any:
        """List delegates matching the query options"""
        return await self.node.delegates.get(query_options(options))

    async def get_delegate(self, options: Dict[str, Any]) -> Any:
        """Look up a delegate by the given options"""
        return await self.node.delegates.get(options)

    async def list_account_delegates(self, address: str) -> Any:
        """List the delegates an account votes for"""
        return await self.node.votes.get({"address": address, "limit": ACCOUNT_DELEGATES_LIMIT})

    async def get_votes(self, options: Dict[str, Any]) -> Any:
        """Fetch one raw votes page"""
        return await self.node.votes.get(options)

    async def _fetch_page(self, address: str, offset: int, limit: int) -> VoteUsageReport:
        query = page_query(address, offset=offset, limit=limit)
        response = await self.node.votes.get(query)
        return VoteUsageReport.from_response(response)
