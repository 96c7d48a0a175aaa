"""
Byte sources for payloads and key material: a file path, or ``-``
for standard input.
"""

import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator


def get_reader(input_path: str) -> BinaryIO:
    if input_path == "-":
        return sys.stdin.buffer
    return open(input_path, "rb")


@contextmanager
def open_source(input_path: str) -> Iterator[BinaryIO]:
    """get_reader() as a context manager; stdin is never closed."""
    reader = get_reader(input_path)
    try:
        yield reader
    finally:
        if input_path != "-":
            reader.close()


def get_content(input_path: str) -> bytes:
    with open_source(input_path) as reader:
        return reader.read()
