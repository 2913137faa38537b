"""Address codec and private key handling for TRON accounts."""

from tron_context.crypto.address import TronAddress, from_hex, is_address, to_hex
from tron_context.crypto.keys import address_from_private_key, generate_account, is_private_key

__all__ = [
    'TronAddress',
    'is_address',
    'to_hex',
    'from_hex',
    'is_private_key',
    'address_from_private_key',
    'generate_account',
]
