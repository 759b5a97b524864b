"""
Write-side operations: shape, sign and broadcast vote and delegate
registration transactions.
"""

import logging
from typing import Any, Callable, Dict, Optional, Sequence

from .interfaces import INodeApi, ISigningService
from .models import VoteTransactionRequest, DelegateRegistrationRequest
from .types import TransactionKind, TransactionState, SigningError

logger = logging.getLogger(__name__)


class VoteTransactionFacade:
    """
    Turns a vote or registration intent into a broadcast transaction.

    Each call runs ``REQUESTED -> SIGNED -> BROADCAST -> ACKNOWLEDGED``.
    A signing failure ends the call in ``FAILED`` before anything reaches
    the node; a broadcast failure ends it in ``FAILED`` after signing.
    There is no retry.
    """

    def __init__(self, node: INodeApi, signer: ISigningService):
        self.node = node
        self.signer = signer

    async def cast_vote(self, passphrase: str, votes: Sequence[str], unvotes: Sequence[str],
                        second_passphrase: Optional[str] = None,
                        time_offset: int = 0) -> Any:
        """Sign and broadcast a vote/unvote transaction"""
        request = VoteTransactionRequest.build(
            passphrase, votes, unvotes,
            second_passphrase=second_passphrase,
            time_offset=time_offset,
        )
        return await self._sign_and_broadcast(
            TransactionKind.VOTE, self.signer.cast_votes, request.to_signing_params()
        )

    async def register_delegate(self, username: str, passphrase: str,
                                second_passphrase: Optional[str] = None,
                                time_offset: int = 0) -> Any:
        """Sign and broadcast a delegate registration transaction"""
        request = DelegateRegistrationRequest(
            username=username,
            passphrase=passphrase,
            second_passphrase=second_passphrase,
            time_offset=time_offset,
        )
        return await self._sign_and_broadcast(
            TransactionKind.DELEGATE_REGISTRATION,
            self.signer.register_delegate,
            request.to_signing_params(),
        )

    async def _sign_and_broadcast(self, kind: TransactionKind,
                                  sign: Callable[[Dict[str, Any]], Any],
                                  params: Dict[str, Any]) -> Any:
        state = TransactionState.REQUESTED
        try:
            signed = sign(params)
        except SigningError as e:
            logger.error(f"Signing {kind.value} transaction failed: {e}")
            self._transition(kind, state, TransactionState.FAILED)
            raise
        except Exception as e:
            logger.error(f"Signing {kind.value} transaction failed: {e}")
            self._transition(kind, state, TransactionState.FAILED)
            raise SigningError(f"Signing {kind.value} transaction failed: {e}") from e
        state = self._transition(kind, state, TransactionState.SIGNED)

        try:
            result = await self.node.transactions.broadcast(signed)
        except Exception as e:
            logger.error(f"Broadcasting {kind.value} transaction failed: {e}")
            self._transition(kind, state, TransactionState.FAILED)
            raise
        state = self._transition(kind, state, TransactionState.BROADCAST)

        self._transition(kind, state, TransactionState.ACKNOWLEDGED)
        return result

    @staticmethod
    def _transition(kind: TransactionKind, current: TransactionState,
                    target: TransactionState) -> TransactionState:
        logger.debug(f"{kind.value} transaction {current.value} -> {target.value}")
        return target
