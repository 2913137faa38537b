"""Unit tests for the TRON address codec."""

import base58
import pytest

from tron_context.crypto.address import (
    TronAddress,
    from_hex,
    is_address,
    to_address,
    to_hex
)
from tron_context.utils.error_handling import InvalidAddress
from tests.fixtures.common import (
    ADDRESS_BASE58,
    ADDRESS_HEX,
    OTHER_ADDRESS_BASE58,
    OTHER_ADDRESS_HEX
)


class TestIsAddress:
    """Tests for is_address."""

    @pytest.mark.parametrize("address", [
        ADDRESS_HEX,
        ADDRESS_HEX.upper(),
        ADDRESS_BASE58,
        OTHER_ADDRESS_HEX,
        OTHER_ADDRESS_BASE58,
    ])
    def test_valid(self, address):
        assert is_address(address) is True

    @pytest.mark.parametrize("address", [
        None,
        123,
        "",
        ADDRESS_HEX[:-1],
        "42" + ADDRESS_HEX[2:],
        "0x" + ADDRESS_HEX[2:],
        ADDRESS_HEX[:-1] + "g",
        ADDRESS_BASE58[:-1],
        ADDRESS_BASE58[:-1] + "a",
        ADDRESS_BASE58[:-1] + "0",
    ])
    def test_invalid(self, address):
        assert is_address(address) is False


class TestConversion:
    """Tests for to_hex and from_hex."""

    def test_base58_to_hex(self):
        assert to_hex(ADDRESS_BASE58) == ADDRESS_HEX

    def test_hex_is_lowercased(self):
        assert to_hex(ADDRESS_HEX.upper()) == ADDRESS_HEX

    def test_hex_to_base58(self):
        assert from_hex(ADDRESS_HEX) == ADDRESS_BASE58
        assert from_hex(OTHER_ADDRESS_HEX) == OTHER_ADDRESS_BASE58

    def test_from_hex_accepts_base58(self):
        assert from_hex(ADDRESS_BASE58) == ADDRESS_BASE58

    @pytest.mark.parametrize("address", ["invalid", ADDRESS_BASE58[:-1] + "a", 41])
    def test_invalid_raises(self, address):
        with pytest.raises(InvalidAddress, match="Invalid address provided"):
            to_hex(address)

    def test_base58_with_wrong_prefix_is_rejected(self):
        # Valid base58check over 21 bytes that lack the 0x41 prefix
        encoded = base58.b58encode_check(bytes.fromhex(ADDRESS_HEX[2:] + "00")).decode()

        with pytest.raises(InvalidAddress):
            to_hex(encoded)


class TestTronAddress:
    """Tests for the TronAddress pair."""

    def test_from_either_form(self):
        from_base58 = TronAddress.from_value(ADDRESS_BASE58)
        from_hex_value = TronAddress.from_value(ADDRESS_HEX)

        assert from_base58 == from_hex_value
        assert from_base58.hex == ADDRESS_HEX
        assert from_base58.base58 == ADDRESS_BASE58
        assert str(from_base58) == ADDRESS_BASE58

    def test_to_address_from_payload(self):
        address = to_address(bytes.fromhex(ADDRESS_HEX[2:]))

        assert address.hex == ADDRESS_HEX
        assert address.base58 == ADDRESS_BASE58

    def test_to_address_requires_twenty_bytes(self):
        with pytest.raises(InvalidAddress):
            to_address(b"\x00" * 21)
