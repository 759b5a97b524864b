"""
Ledger Delegates

Delegate listing, vote aggregation and vote/registration transaction
submission against a remote ledger node.
"""

from .types import (
    MAX_PAGE_SIZE,
    ACCOUNT_DELEGATES_LIMIT,
    TransactionState,
    TransactionKind,
    LedgerError,
    TransportError,
    NodeTimeoutError,
    SigningError,
    ProtocolInvariantViolation
)

from .interfaces import (
    IQueryResource,
    ITransactionsResource,
    INodeApi,
    ISigningService
)

from .models import (
    VoteUsageReport,
    VoteTransactionRequest,
    DelegateRegistrationRequest
)

from .config import NodeSettings, get_settings
from .pagination import PageAggregator
from .transactions import VoteTransactionFacade
from .adapters import HttpNodeApi
from .client import DelegateClient

__all__ = [
    # Types
    "MAX_PAGE_SIZE",
    "ACCOUNT_DELEGATES_LIMIT",
    "TransactionState",
    "TransactionKind",
    "LedgerError",
    "TransportError",
    "NodeTimeoutError",
    "SigningError",
    "ProtocolInvariantViolation",

    # Interfaces
    "IQueryResource",
    "ITransactionsResource",
    "INodeApi",
    "ISigningService",

    # Models
    "VoteUsageReport",
    "VoteTransactionRequest",
    "DelegateRegistrationRequest",

    # Config
    "NodeSettings",
    "get_settings",

    # Components
    "PageAggregator",
    "VoteTransactionFacade",
    "HttpNodeApi",
    "DelegateClient"
]

__version__ = "1.0.0"
