"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Groups fingerprinted files so matching content can be reported together.

Fingerprints ignore whitespace, so a fingerprint group may mix files that
differ only in formatting. Exact grouping splits such groups with an xxHash64
digest of the raw bytes.
"""

from typing import List, Dict, Any, Callable, Optional
from collections import defaultdict
import logging

import xxhash

from cfprint.core.interfaces import FileGrouper, ContentHasher
from cfprint.core.models import FingerprintedFile, FingerprintGroup

logger = logging.getLogger(__name__)

HASH_CHUNK_SIZE = 1024 * 1024


class ContentHasherImpl(ContentHasher):
    """
    Raw-content digest using xxHash64.
    The digest is stored on the file record after the first computation.
    """

    def compute_content_hash(self, file: FingerprintedFile) -> bytes:
        if file.content_hash is not None:
            return file.content_hash
        hasher = xxhash.xxh64()
        with open(file.path, 'rb') as f:
            for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b''):
                hasher.update(chunk)
        file.content_hash = hasher.digest()
        return file.content_hash


class FileGrouperImpl(FileGrouper):
    """
    Groups files by fingerprint, optionally refined by raw content digest.
    Uses an injected ContentHasher for flexibility and testability.
    """

    def __init__(self, content_hasher: Optional[ContentHasher] = None):
        self.content_hasher = content_hasher or ContentHasherImpl()

    def group_by_fingerprint(self, files: List[FingerprintedFile]) -> Dict[int, List[FingerprintedFile]]:
        """Groups files by fingerprint. Files without a fingerprint are ignored."""
        return self._group_by(files, lambda f: f.fingerprint)

    def group_by_content_hash(self, files: List[FingerprintedFile]) -> Dict[bytes, List[FingerprintedFile]]:
        """Groups files by xxHash64 of their raw bytes."""
        return self._group_by(files, self.content_hasher.compute_content_hash)

    def find_groups(self, files: List[FingerprintedFile], exact: bool = False) -> List[FingerprintGroup]:
        """
        Builds the final list of matching groups.

        Args:
            files: Files with computed fingerprints
            exact: Also require byte-identical content inside each group

        Returns:
            Groups of 2+ files, ordered by first path
        """
        groups = []
        for fingerprint, members in self.group_by_fingerprint(files).items():
            if not exact:
                groups.append(FingerprintGroup(fingerprint=fingerprint, files=members))
                continue
            for exact_members in self.group_by_content_hash(members).values():
                groups.append(FingerprintGroup(fingerprint=fingerprint, files=exact_members))

        groups.sort(key=lambda g: g.files[0].path)
        return groups

    @staticmethod
    def _group_by(files: List[FingerprintedFile],
                  key_func: Callable[[FingerprintedFile], Any]) -> Dict[Any, List[FingerprintedFile]]:
        """
        Groups files by any computed key, keeping only groups with 2+ files.
        Files whose key cannot be computed are skipped with a warning.
        """
        groups = defaultdict(list)
        skipped_files = 0
        for file in files:
            try:
                key = key_func(file)
            except OSError as e:
                logger.warning(f"Error processing {file.path}: {e}")
                skipped_files += 1
                continue
            if key is not None:
                groups[key].append(file)

        if skipped_files > 0:
            logger.warning(f"Skipped {skipped_files} files due to read errors")

        return {
            key: sorted(group, key=lambda f: f.path)
            for key, group in groups.items()
            if len(group) >= 2
        }
