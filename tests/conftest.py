"""Test configuration for pytest.

This module imports fixtures that should be available to all tests.
"""

# Import fixtures
from tests.fixtures.common import (  # noqa
    tron_client,
    full_node_provider,
    solidity_node_provider,
    duck_provider,
    sample_block_data,
    sample_event_server_data,
)
