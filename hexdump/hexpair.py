"""
Byte <-> hex digit pair conversion and the sidebar printability test.
"""

from .errors import MalformedHexDigit

HEX_DIGITS = '0123456789abcdef'

_DIGIT_VALUES = {digit: value for value, digit in enumerate(HEX_DIGITS)}


def byte_to_hex(byte: int) -> str:
    """Render one byte as two lowercase hex digits (high nibble first)."""
    return HEX_DIGITS[byte >> 4] + HEX_DIGITS[byte & 0x0F]


def hex_digit_value(char: str) -> int:
    """
    Return the nibble value of a single hex digit.

    Raises:
        MalformedHexDigit: if char is not in 0-9a-f
    """
    try:
        return _DIGIT_VALUES[char]
    except KeyError:
        raise MalformedHexDigit(char) from None


def hex_to_byte(high: str, low: str) -> int:
    """Combine two hex digits back into the byte they encode."""
    return (hex_digit_value(high) << 4) | hex_digit_value(low)


def is_printable(byte: int) -> bool:
    """Printable ASCII, space through tilde."""
    return 32 <= byte < 127
