"""Private key handling.

TRON accounts use the same secp256k1 keys and keccak256 public key hash as
Ethereum accounts; only the address prefix and display encoding differ. Key
derivation is delegated to ``eth_account`` and the resulting 20-byte
payload is re-encoded as a TRON address.
"""

import re
from typing import Any, Dict

from eth_account import Account
from eth_keys import keys
from eth_utils import to_bytes

from tron_context.crypto.address import TronAddress, to_address
from tron_context.utils.error_handling import InvalidPrivateKey

PRIVATE_KEY_PATTERN = re.compile(r"^[0-9a-fA-F]{64}$")

# Order of the secp256k1 group; valid keys lie in [1, SECP256K1_N)
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def is_private_key(private_key: Any) -> bool:
    """Check whether a value is a usable private key.

    The key must be 64 hex characters without a ``0x`` prefix and must be a
    valid secp256k1 scalar.
    """
    if not isinstance(private_key, str) or not PRIVATE_KEY_PATTERN.fullmatch(private_key):
        return False
    if not 0 < int(private_key, 16) < SECP256K1_N:
        return False
    try:
        Account.from_key(private_key)
    except ValueError:
        return False
    return True


def address_from_private_key(private_key: str) -> TronAddress:
    """Derive the address owned by a private key.

    Raises:
        InvalidPrivateKey: If the key is not valid
    """
    if not is_private_key(private_key):
        raise InvalidPrivateKey()

    account = Account.from_key(private_key)
    return to_address(to_bytes(hexstr=account.address))


def generate_account() -> Dict[str, Any]:
    """Create a new random account.

    Returns:
        Dictionary with the hex private key, the hex public key and both
        address forms
    """
    account = Account.create()
    private_key = account.key.hex()
    if private_key.startswith("0x"):
        private_key = private_key[2:]

    public_key = keys.PrivateKey(bytes(account.key)).public_key.to_hex()[2:]
    address = to_address(to_bytes(hexstr=account.address))

    return {
        "private_key": private_key,
        "public_key": "04" + public_key,
        "address": {
            "hex": address.hex,
            "base58": address.base58,
        },
    }
