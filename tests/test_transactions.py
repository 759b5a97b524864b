"""
Tests for vote and delegate registration transactions
"""

import logging

import pytest

from ledger_delegates import SigningError, TransportError


class TestCastVote:
    """Test vote transaction signing and broadcast"""

    @pytest.mark.asyncio
    async def test_broadcasts_signed_transaction(self, facade, node, signer, accounts):
        """The exact signed object is handed to broadcast"""
        votes = [accounts["genesis"]["publicKey"], accounts["delegate"]["publicKey"]]
        unvotes = [
            accounts["empty account"]["publicKey"],
            accounts["delegate candidate"]["publicKey"],
        ]
        transaction = {"id": "1234"}
        signer.cast_votes.return_value = transaction

        result = await facade.cast_vote(
            accounts["genesis"]["passphrase"], votes, unvotes, None, 0
        )

        signer.cast_votes.assert_called_once_with({
            "votes": votes,
            "unvotes": unvotes,
            "passphrase": accounts["genesis"]["passphrase"],
            "secondPassphrase": None,
            "timeOffset": 0,
        })
        node.transactions.broadcast.assert_awaited_once()
        assert node.transactions.broadcast.await_args.args[0] is transaction
        assert result == {"id": "1234"}

    @pytest.mark.asyncio
    async def test_second_passphrase_passed_through(self, facade, signer):
        await facade.cast_vote("passphrase", ["a"], [], "second", 10)

        params = signer.cast_votes.call_args.args[0]
        assert params["secondPassphrase"] == "second"
        assert params["timeOffset"] == 10

    @pytest.mark.asyncio
    async def test_signing_failure_skips_broadcast(self, facade, node, signer):
        """A rejected passphrase never reaches the node"""
        signer.cast_votes.side_effect = ValueError("empty passphrase")

        with pytest.raises(SigningError) as exc_info:
            await facade.cast_vote("", ["a"], [])

        assert isinstance(exc_info.value.__cause__, ValueError)
        node.transactions.broadcast.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_signing_error_not_rewrapped(self, facade, node, signer):
        error = SigningError("bad votes")
        signer.cast_votes.side_effect = error

        with pytest.raises(SigningError) as exc_info:
            await facade.cast_vote("passphrase", ["a"], [])

        assert exc_info.value is error
        node.transactions.broadcast.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_broadcast_failure_propagates(self, facade, node):
        node.transactions.broadcast.side_effect = TransportError("node down", status_code=503)

        with pytest.raises(TransportError) as exc_info:
            await facade.cast_vote("passphrase", ["a"], [])

        assert exc_info.value.status_code == 503
        assert node.transactions.broadcast.await_count == 1

    @pytest.mark.asyncio
    async def test_state_transitions_logged(self, facade, caplog):
        with caplog.at_level(logging.DEBUG, logger="ledger_delegates.transactions"):
            await facade.cast_vote("passphrase", ["a"], [])

        assert "vote transaction requested -> signed" in caplog.text
        assert "vote transaction broadcast -> acknowledged" in caplog.text


class TestRegisterDelegate:
    """Test delegate registration signing and broadcast"""

    @pytest.mark.asyncio
    async def test_without_second_passphrase(self, facade, node, signer):
        """secondPassphrase is omitted from the signing request"""
        transaction = {"id": "1234"}
        signer.register_delegate.return_value = transaction

        await facade.register_delegate("username", "passphrase", None, 0)

        signer.register_delegate.assert_called_once_with({
            "username": "username",
            "passphrase": "passphrase",
            "timeOffset": 0,
        })
        assert node.transactions.broadcast.await_args.args[0] is transaction

    @pytest.mark.asyncio
    async def test_with_second_passphrase(self, facade, node, signer):
        """secondPassphrase is included verbatim"""
        transaction = {"id": "1234"}
        signer.register_delegate.return_value = transaction

        await facade.register_delegate("username", "passphrase", "secondPassphrase", 0)

        signer.register_delegate.assert_called_once_with({
            "username": "username",
            "passphrase": "passphrase",
            "secondPassphrase": "secondPassphrase",
            "timeOffset": 0,
        })
        assert node.transactions.broadcast.await_args.args[0] is transaction

    @pytest.mark.asyncio
    async def test_signing_failure_skips_broadcast(self, facade, node, signer):
        signer.register_delegate.side_effect = ValueError("invalid username")

        with pytest.raises(SigningError):
            await facade.register_delegate("", "passphrase")

        node.transactions.broadcast.assert_not_awaited()


class TestFailedTransitions:
    """Test that failed calls end in the failed state with an error record"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [SigningError("bad votes"), ValueError("empty passphrase")])
    async def test_signing_failure_logged(self, facade, signer, error, caplog):
        signer.cast_votes.side_effect = error

        with caplog.at_level(logging.DEBUG, logger="ledger_delegates.transactions"):
            with pytest.raises(SigningError):
                await facade.cast_vote("passphrase", ["a"], [])

        records = [(r.levelname, r.getMessage()) for r in caplog.records]
        assert ("DEBUG", "vote transaction requested -> failed") in records
        assert any(level == "ERROR" and "Signing vote transaction failed" in message
                   for level, message in records)

    @pytest.mark.asyncio
    async def test_broadcast_failure_logged(self, facade, node, caplog):
        node.transactions.broadcast.side_effect = TransportError("node down")

        with caplog.at_level(logging.DEBUG, logger="ledger_delegates.transactions"):
            with pytest.raises(TransportError):
                await facade.register_delegate("username", "passphrase")

        records = [(r.levelname, r.getMessage()) for r in caplog.records]
        assert ("DEBUG", "delegate_registration transaction signed -> failed") in records
        assert any(level == "ERROR" and "Broadcasting delegate_registration" in message
                   for level, message in records)
