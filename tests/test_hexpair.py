"""
Tests for hex digit conversion and line geometry.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from hexdump.errors import MalformedHexDigit
from hexdump.hexpair import byte_to_hex, hex_digit_value, hex_to_byte, is_printable
from hexdump.layout import SIDEBAR_PADDING, line_address, short_line_padding


def test_byte_to_hex():
    """Bytes render as two lowercase digits."""
    assert byte_to_hex(0x00) == '00'
    assert byte_to_hex(0x0a) == '0a'
    assert byte_to_hex(0xab) == 'ab'
    assert byte_to_hex(0xff) == 'ff'


def test_hex_bijection():
    """Every byte survives the round trip and every pair is distinct."""
    pairs = [byte_to_hex(b) for b in range(256)]
    assert len(set(pairs)) == 256
    for value, pair in enumerate(pairs):
        assert hex_to_byte(pair[0], pair[1]) == value


@pytest.mark.parametrize('char', ['g', 'A', 'F', ':', ' ', '\n', 'z'])
def test_malformed_digit(char):
    """Only 0-9a-f are hex digits."""
    with pytest.raises(MalformedHexDigit) as excinfo:
        hex_digit_value(char)
    assert excinfo.value.char == char


def test_is_printable():
    """Printable range is space through tilde."""
    assert is_printable(ord(' '))
    assert is_printable(ord('~'))
    assert is_printable(ord('A'))
    assert not is_printable(0x1f)
    assert not is_printable(0x7f)
    assert not is_printable(0xff)


def test_line_address():
    """Address is 16 * line index as eight hex digits."""
    assert line_address(0) == '00000000'
    assert line_address(1) == '00000010'
    assert line_address(0x10) == '00000100'
    assert line_address(0x0fffffff) == 'fffffff0'


def test_line_address_wraps():
    """Addresses past 32 bits wrap silently."""
    assert line_address(0x10000000) == '00000000'
    assert line_address(0x10000001) == '00000010'


def test_short_line_padding():
    """Padding shrinks by one group width per whole group."""
    assert SIDEBAR_PADDING == 41
    assert short_line_padding(0) == ' ' * 41
    assert short_line_padding(1) == ' ' * 36
    assert short_line_padding(7) == ' ' * 6


if __name__ == '__main__':
    pytest.main([__file__])
