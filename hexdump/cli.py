#!/usr/bin/env python3
"""
Command-line interface for hexdump.
"""

import argparse
import io
import logging
import sys
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

from .decoder import decode
from .encoder import encode
from .errors import ArgumentError, DumpIOError, HexdumpError

logger = logging.getLogger(__name__)

DESCRIPTION = """\
Dump the hexadecimal representation of a file or the standard input, in the
style of 'xxd'.

The first column is the address of the first byte on the line. Each line
holds 16 bytes in groups of two, separated by spaces. The last column shows
the printable characters among those bytes; the others are shown as '.'.
"""

EPILOG = """\
With --reverse the dump is consumed and the bytes it describes are written
to standard output, which makes it possible to edit a binary file as text:

    hexdump image.bin > image.hex
    $EDITOR image.hex
    hexdump -r image.hex > image.bin

On each line the hex body ends at the first double space, where the
sidebar starts. Keep a single space between groups when editing: anything
after two spaces in a row is treated as sidebar and ignored.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hexdump',
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('-r', '--reverse', action='store_true',
                        help='Do the reverse dump: read a dump and output the bytes it defines')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log progress to standard error')
    parser.add_argument('files', nargs='*', type=Path, metavar='FILE',
                        help='File to read (default: standard input)')
    return parser


def dump(path: Optional[Path]):
    """Encode a file, or standard input, to standard output."""
    source = path if path is not None else sys.stdin.buffer
    encode(source, sys.stdout)
    sys.stdout.flush()


def _read_lines(source: TextIO, path: Optional[Path]) -> Iterator[str]:
    """Iterate over dump lines, reporting read failures against path."""
    try:
        yield from source
    except OSError as exc:
        raise DumpIOError(exc.strerror or str(exc), path) from exc


def reverse_dump(path: Optional[Path]):
    """Decode a dump file, or standard input, to standard output."""
    output = sys.stdout.buffer
    if path is None:
        source = io.TextIOWrapper(sys.stdin.buffer, encoding='latin-1')
        try:
            decode(_read_lines(source, path), output)
        finally:
            source.detach()
    else:
        try:
            f = open(path, 'r', encoding='latin-1')
        except OSError as exc:
            raise DumpIOError(exc.strerror or str(exc), path) from exc
        with f:
            decode(_read_lines(f, path), output)
    output.flush()


def run(args: argparse.Namespace):
    if len(args.files) > 1:
        raise ArgumentError("Too many arguments. Try 'hexdump -h'.")
    path = args.files[0] if args.files else None

    logger.debug("%s %s", 'Decoding' if args.reverse else 'Encoding',
                 path if path is not None else '<stdin>')
    # Input failures arrive as DumpIOError already; a bare OSError here
    # comes from writing standard output.
    try:
        if args.reverse:
            reverse_dump(path)
        else:
            dump(path)
    except OSError as exc:
        raise DumpIOError(exc.strerror or str(exc)) from exc


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(message)s',
        stream=sys.stderr,
    )

    try:
        run(args)
    except ArgumentError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except HexdumpError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
