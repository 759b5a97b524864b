"""
Ledger node adapter implementations.
"""

from .base import NodeResource, TransactionsResource
from .http import HttpNodeApi

__all__ = [
    "NodeResource",
    "TransactionsResource",
    "HttpNodeApi",
]
