"""
Hex dump text -> byte stream.

Each line is tokenized in two phases. The address field (the first eight
non-space characters and the ':' after them) is skipped without checking
its value. The hex body follows, running up to the first double space,
which is where the sidebar starts on every line the encoder writes.
"""

import io
import logging
from typing import BinaryIO, Iterable, Iterator, Optional

from .errors import MalformedHexDigit
from .hexpair import hex_digit_value, hex_to_byte
from .layout import ADDRESS_DIGITS, HEX_DIGITS_PER_LINE

logger = logging.getLogger(__name__)

# address digits plus the ':' separator
_ADDRESS_FIELD_CHARS = ADDRESS_DIGITS + 1


def split_line(line: str) -> Optional[str]:
    """
    Strip the address field and sidebar from a dump line.

    Args:
        line: One line of dump text, with or without its newline

    Returns:
        The hex body (digits and single spaces), or None if the line is
        too short to hold an address field
    """
    line = line.rstrip('\r\n')
    seen = 0
    for pos, char in enumerate(line):
        if char != ' ':
            seen += 1
            if seen == _ADDRESS_FIELD_CHARS:
                break
    else:
        return None

    rest = line[pos + 1:]
    if rest.startswith(' '):
        rest = rest[1:]
    return rest.split('  ', 1)[0]


def iter_body_bytes(body: str) -> Iterator[int]:
    """
    Yield the bytes encoded in a hex body, at most 16 of them.

    A trailing single digit (the stream ended inside a byte) is checked
    but produces nothing.
    """
    digits = body.replace(' ', '')[:HEX_DIGITS_PER_LINE]
    for i in range(0, len(digits) - 1, 2):
        yield hex_to_byte(digits[i], digits[i + 1])
    if len(digits) % 2:
        hex_digit_value(digits[-1])


def decode(source: Iterable[str], output: BinaryIO) -> int:
    """
    Rebuild the bytes described by a hex dump.

    Bytes are written as soon as they are decoded, so on a malformed digit
    everything before it has already reached the output.

    Args:
        source: Text stream (or any iterable of lines) holding the dump
        output: Binary stream receiving the bytes

    Returns:
        Number of bytes written

    Raises:
        MalformedHexDigit: if the hex body holds a character outside 0-9a-f
    """
    written = 0
    line_number = 0
    for line_number, line in enumerate(source, start=1):
        body = split_line(line)
        if body is None:
            continue
        try:
            for value in iter_body_bytes(body):
                output.write(bytes((value,)))
                written += 1
        except MalformedHexDigit as exc:
            raise MalformedHexDigit(exc.char, line=line_number) from None

    logger.debug("Decoded %d bytes from %d lines", written, line_number)
    return written


def decode_text(text: str) -> bytes:
    """Return the bytes described by an in-memory dump."""
    output = io.BytesIO()
    decode(io.StringIO(text), output)
    return output.getvalue()
