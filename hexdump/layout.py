"""
Fixed geometry of a dump line.

A full line looks like::

    00000010: 4869 2074 6865 7265 0a00 0102 0304 0506  Hi there........

address, separator, eight 2-byte groups each followed by a space, one more
space, then the sidebar.
"""

import struct

from .hexpair import byte_to_hex

BYTES_PER_GROUP = 2
GROUPS_PER_LINE = 8
BYTES_PER_LINE = BYTES_PER_GROUP * GROUPS_PER_LINE
HEX_DIGITS_PER_LINE = BYTES_PER_LINE * 2

ADDRESS_DIGITS = 8
ADDRESS_SEPARATOR = ': '

# 4 hex digits plus the trailing space
GROUP_WIDTH = BYTES_PER_GROUP * 2 + 1

# Spaces between the end of the last whole group and the sidebar when
# no group has been written; each whole group on a short line takes
# GROUP_WIDTH of these away.
SIDEBAR_PADDING = GROUPS_PER_LINE * GROUP_WIDTH + 1

PLACEHOLDER = '.'

# Never shown in the sidebar, whatever the printable test says; a raw line
# break there would start a new dump line.
LINE_BREAKS = frozenset(b'\r\n')

_ADDRESS_MASK = 0xFFFFFFFF


def line_address(line_index: int) -> str:
    """
    Address field for a line: line_index * 16 as a big-endian 32-bit value.

    Args:
        line_index: 0-based line number

    Returns:
        Exactly eight lowercase hex digits (wraps past 0xffffffff)
    """
    packed = struct.pack('>I', (line_index * BYTES_PER_LINE) & _ADDRESS_MASK)
    return ''.join(byte_to_hex(b) for b in packed)


def short_line_padding(remaining: int) -> str:
    """Spaces that align the sidebar of a short final line with full lines."""
    return ' ' * (SIDEBAR_PADDING - remaining * GROUP_WIDTH)
