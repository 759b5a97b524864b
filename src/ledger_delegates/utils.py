"""
Request-shaping helpers for node queries.
"""

from typing import Any, Dict, Optional, Union

from .types import MAX_PAGE_SIZE


def normalize_limit(limit: Union[int, str, None], max_limit: int = MAX_PAGE_SIZE) -> int:
    """Clamp a page limit into ``1..max_limit``"""
    if limit is None:
        return max_limit
    return max(1, min(int(limit), max_limit))


def page_query(address: str, offset: int, limit: int) -> Dict[str, Any]:
    """Build a votes query for one page"""
    return {"address": address, "offset": offset, "limit": limit}


def query_options(options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Default missing query options to an unfiltered query"""
    return dict(options) if options else {}


def require_identifier(value: str, name: str = "address") -> str:
    """Reject empty addresses and public keys"""
    if not isinstance(value, str) or not value:
        raise ValueError(f"{name} must be a non-empty string")
    return value
