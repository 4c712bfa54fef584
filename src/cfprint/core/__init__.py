"""
Core fingerprint engine: Murmur2 hashing, preprocessing, scanning and grouping.

- murmur2: 32-bit MurmurHash2 with the legacy constants (seed 1)
- filter_whitespace / normalize_line_endings: byte-level preprocessing
- fingerprint_bytes / fingerprint_stream / fingerprint_file / fingerprint_normalized:
  pure entry points returning the fingerprint as an int
- FileScannerImpl: recursive directory traversal with size/extension filters
- FileGrouperImpl + ContentHasherImpl: grouping by fingerprint and by raw xxHash64 digest

The engine has no GUI, network or logging dependencies.
"""

from cfprint.core.murmur2 import murmur2, SEED, M, R
from cfprint.core.preprocess import filter_whitespace, normalize_line_endings, WHITESPACE_BYTES
from cfprint.core.models import (
    FingerprintMode,
    FingerprintedFile,
    FingerprintGroup,
    FingerprintStats,
    FingerprintParams,
)
from cfprint.core.fingerprint import (
    fingerprint_bytes,
    fingerprint_normalized,
    fingerprint_stream,
    fingerprint_file,
    compute_fingerprint,
    read_stream,
    read_file,
    FingerprinterImpl,
)
from cfprint.core.scanner import FileScannerImpl
from cfprint.core.grouper import FileGrouperImpl, ContentHasherImpl

__all__ = [
    "murmur2",
    "SEED",
    "M",
    "R",
    "filter_whitespace",
    "normalize_line_endings",
    "WHITESPACE_BYTES",
    "FingerprintMode",
    "FingerprintedFile",
    "FingerprintGroup",
    "FingerprintStats",
    "FingerprintParams",
    "fingerprint_bytes",
    "fingerprint_normalized",
    "fingerprint_stream",
    "fingerprint_file",
    "compute_fingerprint",
    "read_stream",
    "read_file",
    "FingerprinterImpl",
    "FileScannerImpl",
    "FileGrouperImpl",
    "ContentHasherImpl",
]
