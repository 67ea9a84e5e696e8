"""
Byte cursor used by the encoder.
"""

from pathlib import Path
from typing import BinaryIO, Optional, Union

from .errors import DumpIOError


class ByteReader:
    """Reads a byte stream one byte at a time."""

    def __init__(self, source: Union[str, Path, BinaryIO]):
        """
        Initialize byte reader.

        Args:
            source: Path to a file, or an already open binary stream.
                A path is opened on entry and closed on exit; a stream is
                left open for its owner.
        """
        if isinstance(source, (str, Path)):
            self.file_path: Optional[Path] = Path(source)
            self._stream: Optional[BinaryIO] = None
        else:
            self.file_path = None
            self._stream = source
        self.file: Optional[BinaryIO] = None
        self.position = 0

    def __enter__(self):
        """Context manager entry."""
        if self.file_path is not None:
            try:
                self.file = open(self.file_path, 'rb')
            except OSError as exc:
                raise DumpIOError(exc.strerror or str(exc), self.file_path) from exc
        else:
            self.file = self._stream
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if self.file and self.file_path is not None:
            self.file.close()
        self.file = None

    def read_byte(self) -> Optional[int]:
        """Read the next byte, or None once the stream is exhausted."""
        if not self.file:
            raise RuntimeError("Stream not open. Use as context manager.")
        try:
            data = self.file.read(1)
        except OSError as exc:
            raise DumpIOError(exc.strerror or str(exc), self.file_path) from exc
        if not data:
            return None
        self.position += 1
        return data[0]

    def tell(self) -> int:
        """Number of bytes consumed so far."""
        return self.position
