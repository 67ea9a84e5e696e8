"""
Exception types raised by the hexdump codec and command-line interface.
"""

from pathlib import Path
from typing import Optional, Union


class HexdumpError(Exception):
    """Base class for every error the tool reports."""


class ArgumentError(HexdumpError):
    """Command line could not be interpreted."""


class DumpIOError(HexdumpError):
    """Opening, reading or writing a stream failed."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class MalformedHexDigit(HexdumpError, ValueError):
    """A character in the hex body is not one of 0-9a-f."""

    def __init__(self, char: str, line: Optional[int] = None):
        self.char = char
        self.line = line
        message = f"Malformed hex digit {char!r}"
        if line is not None:
            message += f" on line {line}"
        super().__init__(message)
