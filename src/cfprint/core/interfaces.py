"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the fingerprinting system.

Key Components:
---------------
- Fingerprinter: Interface for computing fingerprints of buffers, streams and files.
- ContentHasher: Interface for raw-content digests used by exact grouping.
- FileScanner: Interface for scanning directories and returning file records.
- FileGrouper: Interface for grouping files by fingerprint.
"""

from typing import Protocol, List, Dict, Optional, Callable, BinaryIO
from cfprint.core.models import FingerprintedFile, FingerprintGroup


class Fingerprinter(Protocol):
    """Interface for computing 32-bit content fingerprints."""
    def compute_bytes(self, data: bytes) -> int: ...
    def compute_stream(self, stream: BinaryIO) -> int: ...
    def compute_file(self, path: str) -> int: ...


class ContentHasher(Protocol):
    """
    Interface for whole-content digests.

    Used to tell byte-identical files apart from files that only share a
    whitespace-insensitive fingerprint.
    """
    def compute_content_hash(self, file: FingerprintedFile) -> bytes: ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and collecting file metadata.
    """
    def scan(
        self,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> List[FingerprintedFile]:
        """
        Scan files from the configured directory.

        Args:
            stopped_flag: Function that returns True if operation should be canceled.
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            List of files matching filters, fingerprints not yet computed.
        """
        ...


class FileGrouper(Protocol):
    """
    Interface for grouping fingerprinted files.
    Only groups with 2+ files are returned.
    """
    def group_by_fingerprint(self, files: List[FingerprintedFile]) -> Dict[int, List[FingerprintedFile]]:
        """Group files by their fingerprint."""
        ...

    def group_by_content_hash(self, files: List[FingerprintedFile]) -> Dict[bytes, List[FingerprintedFile]]:
        """Group files by their raw content digest."""
        ...

    def find_groups(self, files: List[FingerprintedFile], exact: bool = False) -> List[FingerprintGroup]:
        """Groups of 2+ matching files, refined by raw content when `exact` is set."""
        ...
