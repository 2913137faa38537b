"""TRON address codec.

A TRON address is 21 bytes: the ``0x41`` network prefix followed by the
20-byte account payload. It is shown either as 42 lowercase hex characters
or as the base58check encoding of those bytes (34 characters, starting
with ``T``).
"""

from dataclasses import dataclass
from typing import Any

import base58

from tron_context.utils.error_handling import InvalidAddress
from tron_context.utils.validation import is_hex

ADDRESS_PREFIX = "41"
ADDRESS_PREFIX_BYTE = 0x41
ADDRESS_SIZE = 42  # hex characters
BASE58_ADDRESS_SIZE = 34


@dataclass(frozen=True)
class TronAddress:
    """Both representations of one TRON address."""

    hex: str
    base58: str

    @classmethod
    def from_value(cls, address: str) -> "TronAddress":
        """Build the pair from either representation.

        Raises:
            InvalidAddress: If the value is not a valid address
        """
        hex_address = to_hex(address)
        return cls(hex=hex_address, base58=from_hex(hex_address))

    def __str__(self) -> str:
        return self.base58


def _is_hex_address(address: str) -> bool:
    return (
        len(address) == ADDRESS_SIZE
        and is_hex(address)
        and address.lower().startswith(ADDRESS_PREFIX)
    )


def _decode_base58(address: str) -> bytes:
    try:
        decoded = base58.b58decode_check(address)
    except ValueError as e:
        raise InvalidAddress(details={"address": address, "reason": str(e)})

    if len(decoded) != ADDRESS_SIZE // 2 or decoded[0] != ADDRESS_PREFIX_BYTE:
        raise InvalidAddress(details={"address": address})
    return decoded


def is_address(address: Any) -> bool:
    """Check whether a value is a valid hex or base58 TRON address."""
    if not isinstance(address, str):
        return False

    if _is_hex_address(address):
        return True

    if len(address) != BASE58_ADDRESS_SIZE:
        return False
    try:
        _decode_base58(address)
    except InvalidAddress:
        return False
    return True


def to_hex(address: str) -> str:
    """Return the lowercase hex form of an address given in either form.

    Raises:
        InvalidAddress: If the value is not a valid address
    """
    if not isinstance(address, str):
        raise InvalidAddress(details={"address": repr(address)})

    if _is_hex_address(address):
        return address.lower()

    if len(address) != BASE58_ADDRESS_SIZE:
        raise InvalidAddress(details={"address": address})
    return _decode_base58(address).hex()


def from_hex(address: str) -> str:
    """Return the base58 form of an address given in either form.

    Raises:
        InvalidAddress: If the value is not a valid address
    """
    hex_address = to_hex(address)
    return base58.b58encode_check(bytes.fromhex(hex_address)).decode("ascii")


def to_address(payload: bytes) -> TronAddress:
    """Build an address from its 20-byte account payload."""
    if len(payload) != 20:
        raise InvalidAddress(details={"payload_length": len(payload)})
    return TronAddress.from_value(ADDRESS_PREFIX + payload.hex())
