"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/fingerprint.py
Fingerprint entry points: in-memory buffers, binary streams and files.

Every entry point filters whitespace, hashes with Murmur2 (seed 1) and returns
the unsigned 32-bit result as a plain int, which fits 64-bit signed identifier
fields without truncation. The functions are pure and keep no state between
calls. I/O errors from streams and files propagate to the caller unchanged.
"""

from typing import BinaryIO, Union
import os

from cfprint.core.interfaces import Fingerprinter
from cfprint.core.models import FingerprintMode
from cfprint.core.murmur2 import murmur2
from cfprint.core.preprocess import filter_whitespace, normalize_line_endings

READ_CHUNK_SIZE = 1024 * 1024

PathLike = Union[str, os.PathLike]


def fingerprint_bytes(data: bytes) -> int:
    """Fingerprints an in-memory buffer. Never fails for bytes-like input."""
    return murmur2(filter_whitespace(data))


def fingerprint_normalized(data: bytes) -> int:
    """Fingerprints a buffer after collapsing CRLF / CR line endings to LF."""
    return fingerprint_bytes(normalize_line_endings(data))


def compute_fingerprint(data: bytes, mode: FingerprintMode = FingerprintMode.STANDARD) -> int:
    """Fingerprints a buffer with the preprocessing pipeline selected by `mode`."""
    if mode is FingerprintMode.NORMALIZED:
        return fingerprint_normalized(data)
    return fingerprint_bytes(data)


def read_stream(stream: BinaryIO) -> bytes:
    """
    Drains a readable binary stream until EOF.
    The stream is left open; closing it is the caller's job.

    Raises:
        BlockingIOError: If a non-blocking stream has no data available
        OSError: Propagated from the underlying read
    """
    chunks = []
    while True:
        chunk = stream.read(READ_CHUNK_SIZE)
        if chunk is None:
            raise BlockingIOError("Stream has no data available; cannot read it to the end")
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


def read_file(path: PathLike) -> bytes:
    """Reads an entire file; the handle is released on every exit path."""
    with open(path, 'rb') as f:
        return read_stream(f)


def fingerprint_stream(stream: BinaryIO) -> int:
    """Fingerprints everything left in `stream`."""
    return fingerprint_bytes(read_stream(stream))


def fingerprint_file(path: PathLike) -> int:
    """
    Fingerprints the contents of a file.

    Raises:
        FileNotFoundError, PermissionError, IsADirectoryError, OSError
    """
    return fingerprint_bytes(read_file(path))


class FingerprinterImpl(Fingerprinter):
    """
    A fingerprinter bound to one preprocessing mode.
    Stateless apart from the mode, so one instance can be shared freely.
    """

    def __init__(self, mode: FingerprintMode = FingerprintMode.STANDARD):
        self.mode = mode

    def compute_bytes(self, data: bytes) -> int:
        return compute_fingerprint(data, self.mode)

    def compute_stream(self, stream: BinaryIO) -> int:
        return compute_fingerprint(read_stream(stream), self.mode)

    def compute_file(self, path: PathLike) -> int:
        return compute_fingerprint(read_file(path), self.mode)

    def __repr__(self):
        return f"<FingerprinterImpl mode={self.mode.value}>"
