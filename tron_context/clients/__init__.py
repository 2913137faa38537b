"""Client context for the TRON network.

This package provides the object that holds a session's endpoints and
default account.
"""

from tron_context.clients.tron_client import TronClient

__all__ = [
    'TronClient',
]
