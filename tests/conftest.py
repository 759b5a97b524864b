"""
Pytest fixtures for delegate client tests
"""

import pytest
from unittest.mock import AsyncMock, Mock

from ledger_delegates import PageAggregator, VoteTransactionFacade, DelegateClient


ACCOUNTS = {
    "genesis": {
        "passphrase": "wagon stock borrow episode laundry kitten salute link globe zero feed marble",
        "publicKey": "c094ebee7ec0c50ebee32918655e089f6e1a604b83bcaa760293c61e0f18ab6f",
        "address": "16313739661670634666L",
    },
    "delegate": {
        "passphrase": "recipe bomb humor antenna policy verify segment spare grid bundle cage elevator",
        "publicKey": "86499879448d1b0215d59cbf078836e3d7d9d2782d56a2274a568761bff36f19",
        "address": "537318935439898807L",
    },
    "empty account": {
        "passphrase": "stay undo rain loyal sunny wink trash debate arrest pistol broom emerge",
        "publicKey": "adb617df6d8d4f0ca1a1fbd4b19d7a4fcf5e4d1b0d4d5ac3bd3ab3a9ab9c1d5f",
        "address": "1155682438012955434L",
    },
    "delegate candidate": {
        "passphrase": "right cat soul renew under climb middle maid powder churn cram coconut",
        "publicKey": "35b9364d1733e503599a1e9eefdb4994dd07bb9924acebfec06195cf1a0fa6db",
        "address": "544792633152563672L",
    },
}


@pytest.fixture
def accounts():
    """Well-known test accounts"""
    return ACCOUNTS


@pytest.fixture
def node():
    """Node API double with async resources"""
    mock = Mock()
    mock.delegates.get = AsyncMock()
    mock.votes.get = AsyncMock()
    mock.voters.get = AsyncMock()
    mock.transactions.broadcast = AsyncMock(return_value={"id": "1234"})
    return mock


@pytest.fixture
def signer():
    """Signing service double"""
    mock = Mock()
    mock.cast_votes.return_value = {"id": "1234"}
    mock.register_delegate.return_value = {"id": "1234"}
    return mock


@pytest.fixture
def aggregator(node):
    return PageAggregator(node)


@pytest.fixture
def facade(node, signer):
    return VoteTransactionFacade(node, signer)


@pytest.fixture
def client(node, signer):
    return DelegateClient(node, signer)


def votes_page(votes, votes_used):
    """Node votes response in its data envelope"""
    return {"data": {"votes": list(votes), "votesUsed": votes_used}}


@pytest.fixture
def make_page():
    return votes_page
