"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for fingerprinting files and grouping them by fingerprint.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional
import os
from enum import Enum

from cfprint.utils.convert_utils import ConvertUtils


# =============================
# Enums
# =============================

class FingerprintMode(Enum):
    """
    Preprocessing pipeline applied before hashing.
    """
    STANDARD = "standard"
    NORMALIZED = "normalized"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            FingerprintMode.STANDARD: "Standard",
            FingerprintMode.NORMALIZED: "Normalized",
        }
        return mapping.get(self, self.value)

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            FingerprintMode.STANDARD:
                "Whitespace filter → Murmur2",
            FingerprintMode.NORMALIZED:
                "Line endings → LF → Whitespace filter → Murmur2",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass
class FingerprintedFile:
    """
    Represents a single file on the file system together with its fingerprint.
    `fingerprint` stays None until the file has been read and hashed.
    """
    path: str
    size: int  # in bytes
    name: Optional[str] = None
    extension: Optional[str] = None
    fingerprint: Optional[int] = None
    content_hash: Optional[bytes] = None  # raw-content digest, set only for exact grouping

    def __post_init__(self):
        """Automatically extract basename and extension from path if not provided."""
        if self.name is None:
            self.name = os.path.basename(self.path)

        if self.extension is None:
            _, ext = os.path.splitext(self.name)
            self.extension = ext.lower()  # ".JAR" → ".jar"

    def __repr__(self):
        return f"<FingerprintedFile path={self.path}, size={self.size}, fingerprint={self.fingerprint}>"


@dataclass
class FingerprintGroup:
    """
    A group of files sharing one fingerprint.
    With exact grouping, files in a group are also byte-identical.
    """
    fingerprint: int
    files: List[FingerprintedFile]

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def size(self) -> int:
        """Total size of all files in the group."""
        return sum(f.size for f in self.files)

    def __repr__(self):
        return f"<FingerprintGroup fingerprint={self.fingerprint}, count={len(self.files)}>"


@dataclass
class FingerprintStats:
    """
    Statistics collected while fingerprinting a batch of files.
    """
    total_files: int = 0
    fingerprinted_files: int = 0
    total_bytes: int = 0
    groups_found: int = 0
    scan_time: float = 0.0
    fingerprint_time: float = 0.0
    group_time: float = 0.0
    failed_files: Dict[str, str] = field(default_factory=dict)

    @property
    def total_time(self) -> float:
        return self.scan_time + self.fingerprint_time + self.group_time

    def record_failure(self, path: str, error: Exception) -> None:
        self.failed_files[path] = str(error)

    def print_summary(self) -> str:
        lines = [
            "📊 Fingerprint Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            f"📁 Files scanned: {self.total_files} ({self.scan_time:.3f}s)",
            f"🔑 Files fingerprinted: {self.fingerprinted_files} "
            f"[{ConvertUtils.bytes_to_human(self.total_bytes)}] ({self.fingerprint_time:.3f}s)",
        ]
        if self.groups_found or self.group_time > 0:
            lines.append(f"🔍 Matching groups: {self.groups_found} ({self.group_time:.3f}s)")
        if self.failed_files:
            lines.append(f"⚠️ Failed files: {len(self.failed_files)}")

        return "\n".join(lines)


@dataclass
class FingerprintParams:
    """Parameters for a batch fingerprint operation with validation."""
    root_dir: str
    min_size_bytes: Optional[int] = None
    max_size_bytes: Optional[int] = None
    extensions: List[str] = field(default_factory=list)
    excluded_dirs: List[str] = field(default_factory=list)
    mode: FingerprintMode = FingerprintMode.STANDARD
    find_duplicates: bool = False
    exact: bool = False

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.min_size_bytes is not None and self.min_size_bytes < 0:
            raise ValueError("Minimum size cannot be negative")

        if (self.min_size_bytes is not None and self.max_size_bytes is not None
                and self.max_size_bytes < self.min_size_bytes):
            raise ValueError("Maximum size cannot be less than minimum size")

        if self.exact and not self.find_duplicates:
            raise ValueError("Exact matching requires duplicate grouping")

        # Normalize extensions: ensure they start with dot and are lowercase
        normalized = []
        for ext in self.extensions:
            ext = ext.strip().lower()
            if ext and not ext.startswith('.'):
                ext = f".{ext}"
            if ext:
                normalized.append(ext)
        self.extensions = normalized

    @staticmethod
    def from_human_readable(
            root_dir: str,
            min_size_str: str = "0",
            max_size_str: str = "",
            extensions_str: str = "",
            excluded_dirs: Optional[List[str]] = None,
            mode: FingerprintMode = FingerprintMode.STANDARD,
            find_duplicates: bool = False,
            exact: bool = False,
    ) -> 'FingerprintParams':
        """
        Factory method to create params from human-readable inputs.
        An empty max size means no upper limit.
        """
        min_size = ConvertUtils.human_to_bytes(min_size_str) if min_size_str else None
        max_size = ConvertUtils.human_to_bytes(max_size_str) if max_size_str else None

        ext_list = [
            ext.strip() for ext in extensions_str.split(",") if ext.strip()
        ] if extensions_str else []

        return FingerprintParams(
            root_dir=root_dir,
            min_size_bytes=min_size,
            max_size_bytes=max_size,
            extensions=ext_list,
            excluded_dirs=excluded_dirs or [],
            mode=mode,
            find_duplicates=find_duplicates,
            exact=exact,
        )
