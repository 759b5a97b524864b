"""
Core types, constants and errors for delegate voting operations.
"""

from enum import Enum
from typing import Optional


# Largest page the node will serve for a votes query
MAX_PAGE_SIZE = 100

# Account delegate listings always ask for the full active delegate round
ACCOUNT_DELEGATES_LIMIT = "101"


class TransactionState(Enum):
    """Lifecycle of a single write operation"""
    REQUESTED = "requested"
    SIGNED = "signed"
    BROADCAST = "broadcast"
    ACKNOWLEDGED = "acknowledged"
    FAILED = "failed"


class TransactionKind(Enum):
    """Kinds of transactions the facade builds"""
    VOTE = "vote"
    DELEGATE_REGISTRATION = "delegate_registration"


class LedgerError(Exception):
    """Base exception for ledger node and signing operations"""
    def __init__(self, message: str, error_code: Optional[str] = None):
        self.error_code = error_code
        super().__init__(message)


class TransportError(LedgerError):
    """A call to the ledger node failed"""
    def __init__(self, message: str, status_code: Optional[int] = None,
                 error_code: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message, error_code=error_code)


class NodeTimeoutError(TransportError):
    """A call to the ledger node timed out"""
    pass


class SigningError(LedgerError):
    """The signing service rejected the transaction parameters"""
    pass


class ProtocolInvariantViolation(LedgerError):
    """The node returned vote page data that breaks the paging contract"""
    pass
