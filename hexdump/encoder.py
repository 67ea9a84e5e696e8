"""
Byte stream -> hex dump text.

Each line carries 16 bytes: the address of its first byte, eight groups of
two bytes in hex, and a sidebar with the printable characters. The last
line may be short; its sidebar is padded to the same column as full lines.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Callable, List, Optional, TextIO, Union

from .hexpair import byte_to_hex, is_printable
from .layout import (
    ADDRESS_SEPARATOR,
    BYTES_PER_GROUP,
    GROUPS_PER_LINE,
    LINE_BREAKS,
    PLACEHOLDER,
    line_address,
    short_line_padding,
)
from .reader import ByteReader

logger = logging.getLogger(__name__)


def _encode_line(reader: ByteReader, output: TextIO, sidebar: List[str],
                 printable: Callable[[int], bool]) -> Optional[int]:
    """
    Write the hex body of one line.

    Returns:
        None if all eight groups were written, otherwise the number of
        whole groups written before the stream ran out.
    """
    for group in range(GROUPS_PER_LINE):
        for _ in range(BYTES_PER_GROUP):
            byte = reader.read_byte()
            if byte is None:
                return group
            output.write(byte_to_hex(byte))
            if byte in LINE_BREAKS or not printable(byte):
                sidebar.append(PLACEHOLDER)
            else:
                sidebar.append(chr(byte))
        output.write(' ')
    return None


def encode(source: Union[str, Path, BinaryIO], output: TextIO,
           printable: Callable[[int], bool] = is_printable) -> int:
    """
    Dump a byte stream as hex text.

    Args:
        source: Binary stream or path to read
        output: Text stream the dump is written to
        printable: Predicate choosing which bytes show in the sidebar;
            the others show as '.'. Line breaks always show as '.'.

    Returns:
        Number of bytes encoded
    """
    line_index = 0
    with ByteReader(source) as reader:
        while True:
            output.write(line_address(line_index))
            output.write(ADDRESS_SEPARATOR)

            sidebar: List[str] = []
            remaining = _encode_line(reader, output, sidebar, printable)
            if remaining is None:
                output.write(' ')
                output.write(''.join(sidebar))
                output.write('\n')
                line_index += 1
                continue

            output.write(short_line_padding(remaining))
            output.write(''.join(sidebar[:remaining * BYTES_PER_GROUP]))
            output.write('\n')
            break

        total = reader.tell()

    logger.debug("Encoded %d bytes into %d lines", total, line_index + 1)
    return total


def encode_bytes(data: bytes, printable: Callable[[int], bool] = is_printable) -> str:
    """Return the dump of an in-memory byte string."""
    output = io.StringIO()
    encode(io.BytesIO(data), output, printable)
    return output.getvalue()
