"""
cfprint: whitespace-insensitive content fingerprints.

Core features:
- Murmur2 (seed 1) fingerprints matching the legacy mod-repository definition
- Whitespace filtering and optional line-ending normalization before hashing
- Fingerprints for buffers, binary streams and files
- Directory scanning and grouping of files with matching content
- CLI interface (`cfprint`)
"""

from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("cfprint")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API: only what users should import directly
from cfprint.core import (
    murmur2,
    filter_whitespace,
    normalize_line_endings,
    fingerprint_bytes,
    fingerprint_normalized,
    fingerprint_stream,
    fingerprint_file,
    compute_fingerprint,
    FingerprintMode,
    FingerprinterImpl,
    FingerprintedFile,
    FingerprintGroup,
    FingerprintParams,
    FingerprintStats,
)
from cfprint.commands import FingerprintCommand
from cfprint.utils.convert_utils import ConvertUtils

__all__ = [
    "murmur2",
    "filter_whitespace",
    "normalize_line_endings",
    "fingerprint_bytes",
    "fingerprint_normalized",
    "fingerprint_stream",
    "fingerprint_file",
    "compute_fingerprint",
    "FingerprintMode",
    "FingerprinterImpl",
    "FingerprintedFile",
    "FingerprintGroup",
    "FingerprintParams",
    "FingerprintStats",
    "FingerprintCommand",
    "ConvertUtils",
    "__version__",
]
