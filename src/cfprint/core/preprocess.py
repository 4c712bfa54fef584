"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/preprocess.py
Byte-level preprocessing applied before hashing.

Two stages are available:
- filter_whitespace: drops tab, line feed, carriage return and space bytes
- normalize_line_endings: rewrites CRLF and lone CR to LF

The normalized pipeline is always normalize -> filter -> hash. Because the
filter strips CR and LF as well, both pipelines currently agree on every input;
normalization without filtering is not a supported mode.
"""

WHITESPACE_BYTES = b"\t\n\r "


def as_bytes(data) -> bytes:
    """
    Returns an immutable bytes view of any bytes-like object.
    Raises TypeError for str, int and other non-buffer objects.
    """
    if isinstance(data, bytes):
        return data
    return memoryview(data).tobytes()


def filter_whitespace(data: bytes) -> bytes:
    """Returns a copy of `data` without bytes 9, 10, 13 and 32, order preserved."""
    return as_bytes(data).translate(None, WHITESPACE_BYTES)


def normalize_line_endings(data: bytes) -> bytes:
    """
    Converts all line endings to LF.
    CRLF collapses to a single LF, a CR not followed by LF becomes LF.
    """
    return as_bytes(data).replace(b"\r\n", b"\n").replace(b"\r", b"\n")
