"""Conversions between unsigned integers and decimal text."""

from __future__ import annotations

_UINT32_MAX = 0xFFFFFFFF
_UINT8_MAX = 0xFF
_ASCII_NUM_OFFSET = ord("0")


def int_to_str(num: int, buf_size: int) -> str:
    """Decimal text of an unsigned 32-bit ``num`` that fits ``buf_size`` characters.

    Raises ``ValueError`` if the space is empty, the number is out of range,
    or its digits do not fit.
    """
    if buf_size <= 0:
        raise ValueError("buffer size must be positive")
    if not 0 <= num <= _UINT32_MAX:
        raise ValueError(f"{num} is not an unsigned 32-bit integer")
    text = str(num)
    if len(text) > buf_size:
        raise ValueError(f"{num} needs {len(text)} digits, only {buf_size} available")
    return text


def int_to_char(num: int) -> str:
    """The last decimal digit of an unsigned byte as a character."""
    if not 0 <= num <= _UINT8_MAX:
        raise ValueError(f"{num} is not an unsigned byte")
    return chr(num % 10 + _ASCII_NUM_OFFSET)