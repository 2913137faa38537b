"""Validation utilities for the TRON client context.

This module provides pure predicates over user supplied values. None of
them raise; callers decide which error to signal.
"""

import re
from numbers import Integral, Real
from typing import Any, Optional

import httpx

URL_SCHEMES = ("http", "https")

HEX_PATTERN = re.compile(r"^(0x)?[0-9a-fA-F]*$")

INTEGER_STRING_PATTERN = re.compile(r"^[+-]?\d+$")


def is_valid_url(value: Any) -> bool:
    """Check whether a value is an absolute http(s) URL.

    Args:
        value: The value to check

    Returns:
        True if the value is a string holding an absolute URL, False otherwise
    """
    if not value or not isinstance(value, str):
        return False
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL:
        return False
    return url.scheme in URL_SCHEMES and bool(url.host)


def is_hex(value: Any) -> bool:
    """Check whether a value is a non-empty hex string (``0x`` prefix allowed)."""
    if not value or not isinstance(value, str):
        return False
    return bool(HEX_PATTERN.fullmatch(value)) and value not in ("0x", "0X")


def is_integer(value: Any) -> bool:
    """Check whether a value is an integral number.

    Booleans are rejected even though ``bool`` subclasses ``int``; floats
    count only when they carry no fractional component.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, Integral):
        return True
    if isinstance(value, Real):
        return float(value).is_integer()
    return False


def parse_integer(value: Any) -> Optional[int]:
    """Interpret a number or numeric string as an ``int``.

    Args:
        value: An integral number or a string of decimal digits with an
            optional sign

    Returns:
        The integer value, or None if the value does not denote an integer
    """
    if is_integer(value):
        return int(value)
    if isinstance(value, str) and INTEGER_STRING_PATTERN.fullmatch(value.strip()):
        return int(value.strip())
    return None


def has_properties(data: Any, *properties: str) -> bool:
    """Check that a decoded JSON object carries every given key."""
    return isinstance(data, dict) and all(prop in data for prop in properties)
