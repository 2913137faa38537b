"""Common test fixtures for tron-context tests.

This module provides fixtures and constants that can be reused across
different test modules.
"""

from types import SimpleNamespace

import httpx
import pytest

from tron_context.clients.tron_client import TronClient
from tron_context.providers.http_provider import HttpProvider

FULL_NODE_API = "https://api.trongrid.io:8090"
SOLIDITY_NODE_API = "https://api.trongrid.io:8091"
EVENT_API = "https://api.trongrid.io/"
PRIVATE_KEY = "da146374a75310b9666e834ee4ad0866d6f4035967bfc76217c5a495fff9f0d0"
ADDRESS_HEX = "41928c9af0651632157ef27a2cf17ca72c575a4d21"
ADDRESS_BASE58 = "TPL66VK2gCXNCD7EJg9pgJRfqcRazjhUZY"

# Same payload as ADDRESS_HEX with the last nibble changed; no known key owns it
OTHER_ADDRESS_HEX = "41928c9af0651632157ef27a2cf17ca72c575a4d28"
OTHER_ADDRESS_BASE58 = "TPL66VK2gCXNCD7EJg9pgJRfqcRbnn4zcp"


@pytest.fixture
def tron_client():
    """Create a fully configured client."""
    return TronClient(FULL_NODE_API, SOLIDITY_NODE_API, EVENT_API, PRIVATE_KEY)


@pytest.fixture
def full_node_provider():
    return HttpProvider(FULL_NODE_API)


@pytest.fixture
def solidity_node_provider():
    return HttpProvider(SOLIDITY_NODE_API)


@pytest.fixture
def duck_provider():
    """A provider-shaped object that is not an HttpProvider."""
    return SimpleNamespace(host="https://nile.trongrid.io")


def mock_transport(handler):
    """Build an HTTP client whose requests are answered by handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


# Test data fixtures
@pytest.fixture
def sample_block_data():
    """Sample response of wallet/getnowblock."""
    return {
        "blockID": "0000000002faf0809e3e8c8bcbd6b28e6f5e8b3f1b8f1e7e59c9d0f7e0c2a1b3",
        "block_header": {
            "raw_data": {
                "number": 50000000,
                "txTrieRoot": "0000000000000000000000000000000000000000000000000000000000000000",
                "witness_address": ADDRESS_HEX,
                "parentHash": "0000000002faf07f4b7c2f3b2c9a7a1a0e4f5d6c7b8a9f0e1d2c3b4a59687766",
                "version": 27,
                "timestamp": 1680000000000
            },
            "witness_signature": "00"
        }
    }


@pytest.fixture
def sample_event_server_data():
    """Sample response of the event server root page."""
    return {
        "_links": {
            "self": {"href": EVENT_API},
            "events": {"href": EVENT_API + "events"}
        }
    }
