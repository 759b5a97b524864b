"""
Data models for vote pages and transaction requests.
"""

from typing import Optional, Dict, Any, List, Mapping, Sequence, Tuple
from dataclasses import dataclass, field

from .types import ProtocolInvariantViolation


@dataclass(frozen=True)
class VoteUsageReport:
    """One page of votes cast by an address"""
    votes: Tuple[Any, ...]
    votes_used: int

    @classmethod
    def from_response(cls, response: Mapping[str, Any]) -> "VoteUsageReport":
        """
        Build a report from a node votes response.

        The node wraps its payload in a ``data`` envelope; a bare
        ``{"votes": ..., "votesUsed": ...}`` mapping is accepted as well.

        Raises:
            ProtocolInvariantViolation: If the payload is not a mapping, if
                ``votes`` is not a list, or if ``votesUsed`` is missing, not
                an integer or negative.
        """
        if not isinstance(response, Mapping):
            raise ProtocolInvariantViolation(
                f"Expected a mapping for votes page, got {type(response).__name__}"
            )
        payload = response.get("data", response)
        if not isinstance(payload, Mapping):
            raise ProtocolInvariantViolation(
                f"Expected a mapping for votes payload, got {type(payload).__name__}"
            )

        votes_used = payload.get("votesUsed")
        if isinstance(votes_used, bool) or not isinstance(votes_used, int):
            raise ProtocolInvariantViolation(f"Invalid votesUsed value: {votes_used!r}")
        if votes_used < 0:
            raise ProtocolInvariantViolation(f"Negative votesUsed value: {votes_used}")

        votes = payload.get("votes")
        if votes is None:
            votes = []
        if not isinstance(votes, list):
            raise ProtocolInvariantViolation(f"Invalid votes value: {votes!r}")

        return cls(votes=tuple(votes), votes_used=votes_used)


@dataclass(frozen=True)
class VoteTransactionRequest:
    """Parameters for a vote/unvote transaction"""
    passphrase: str
    votes: Tuple[str, ...] = field(default_factory=tuple)
    unvotes: Tuple[str, ...] = field(default_factory=tuple)
    second_passphrase: Optional[str] = None
    time_offset: int = 0

    @classmethod
    def build(cls, passphrase: str, votes: Sequence[str], unvotes: Sequence[str],
              second_passphrase: Optional[str] = None,
              time_offset: int = 0) -> "VoteTransactionRequest":
        return cls(
            passphrase=passphrase,
            votes=tuple(votes or ()),
            unvotes=tuple(unvotes or ()),
            second_passphrase=second_passphrase,
            time_offset=time_offset,
        )

    def to_signing_params(self) -> Dict[str, Any]:
        """Convert to the signing service's input format"""
        return {
            "votes": list(self.votes),
            "unvotes": list(self.unvotes),
            "passphrase": self.passphrase,
            "secondPassphrase": self.second_passphrase,
            "timeOffset": self.time_offset,
        }


@dataclass(frozen=True)
class DelegateRegistrationRequest:
    """Parameters for a delegate registration transaction"""
    username: str
    passphrase: str
    second_passphrase: Optional[str] = None
    time_offset: int = 0

    def to_signing_params(self) -> Dict[str, Any]:
        """Convert to the signing service's input format.

        ``secondPassphrase`` is left out entirely when none was given.
        """
        params: Dict[str, Any] = {
            "username": self.username,
            "passphrase": self.passphrase,
            "timeOffset": self.time_offset,
        }
        if self.second_passphrase is not None:
            params["secondPassphrase"] = self.second_passphrase
        return params


def merge_pages(pages: List[VoteUsageReport]) -> List[Any]:
    """Concatenate page votes in node order"""
    merged: List[Any] = []
    for page in pages:
        merged.extend(page.votes)
    return merged
