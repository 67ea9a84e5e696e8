"""
Hex dump encoder and decoder.
"""

from .decoder import decode, decode_text
from .encoder import encode, encode_bytes
from .errors import ArgumentError, DumpIOError, HexdumpError, MalformedHexDigit

__all__ = [
    'ArgumentError',
    'DumpIOError',
    'HexdumpError',
    'MalformedHexDigit',
    'decode',
    'decode_text',
    'encode',
    'encode_bytes',
]

__version__ = '0.1.0'
