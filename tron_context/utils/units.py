"""Unit conversion and encoding helpers."""

from decimal import Decimal, InvalidOperation
from typing import Union

from eth_utils import keccak

from tron_context.utils.error_handling import ValidationError
from tron_context.utils.validation import is_hex

SUN_PER_TRX = Decimal(1_000_000)

Number = Union[int, float, str, Decimal]


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid amount provided: {value!r}")
    try:
        # str() keeps floats such as 0.1 from dragging in binary noise
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Invalid amount provided: {value!r}")
    if not result.is_finite():
        raise ValidationError(f"Invalid amount provided: {value!r}")
    return result


def to_sun(trx: Number) -> int:
    """Convert an amount of TRX to sun.

    Args:
        trx: Amount in TRX

    Returns:
        Amount in sun

    Raises:
        ValidationError: If the amount is not a number or has more than
            six decimal places
    """
    sun = _to_decimal(trx) * SUN_PER_TRX
    if sun != sun.to_integral_value():
        raise ValidationError(f"Amount has more precision than one sun: {trx!r}")
    return int(sun)


def from_sun(sun: Number) -> Decimal:
    """Convert an amount of sun to TRX."""
    return _to_decimal(sun) / SUN_PER_TRX


def to_hex(value: Union[str, bytes, int]) -> str:
    """Hex-encode a value.

    Hex strings are returned normalized, other strings are UTF-8 encoded,
    integers are written in base 16.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Cannot hex-encode {value!r}")
    if isinstance(value, int):
        return hex(value)
    if isinstance(value, bytes):
        return "0x" + value.hex()
    if is_hex(value) and value.lower().startswith("0x"):
        return value.lower()
    return from_utf8(value)


def from_utf8(value: str) -> str:
    return "0x" + value.encode("utf-8").hex()


def to_utf8(value: str) -> str:
    """Decode a hex string to text."""
    if not is_hex(value):
        raise ValidationError(f"Invalid hex string provided: {value!r}")
    if value.lower().startswith("0x"):
        value = value[2:]
    try:
        return bytes.fromhex(value).decode("utf-8")
    except ValueError:
        raise ValidationError(f"Hex string is not UTF-8 text: {value!r}")


def sha3(value: Union[str, bytes], prefix: bool = True) -> str:
    """Keccak-256 of a text string or raw bytes, hex encoded."""
    data = value.encode("utf-8") if isinstance(value, str) else value
    digest = keccak(data).hex()
    return "0x" + digest if prefix else digest
