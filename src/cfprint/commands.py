"""
Command orchestrator for batch fingerprinting.
Single place for the scan → fingerprint → group workflow used by the CLI.
"""
from typing import List, Optional, Callable, Tuple
import time
import logging

from cfprint.core.models import FingerprintedFile, FingerprintGroup, FingerprintParams, FingerprintStats
from cfprint.core.scanner import FileScannerImpl
from cfprint.core.fingerprint import FingerprinterImpl
from cfprint.core.grouper import FileGrouperImpl
from cfprint.core.interfaces import FileGrouper

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 100


class FingerprintCommand:
    """
    Orchestrates the batch workflow:
    1. Scan the root directory with size/extension/exclusion filters
    2. Fingerprint every file with the requested mode
    3. Optionally group files sharing a fingerprint (and raw content, if exact)

    Usage:
        params = FingerprintParams(root_dir="~/mods", extensions=[".jar"], find_duplicates=True)
        files, groups, stats = FingerprintCommand().execute(
            params,
            progress_callback=cli_progress_printer,
            stopped_flag=signal_handler_check
        )
    """

    def __init__(self, grouper: Optional[FileGrouper] = None):
        self._grouper = grouper or FileGrouperImpl()
        self._files: List[FingerprintedFile] = []

    def execute(
            self,
            params: FingerprintParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
            stopped_flag: Optional[Callable[[], bool]] = None
    ) -> Tuple[List[FingerprintedFile], List[FingerprintGroup], FingerprintStats]:
        """
        Execute batch fingerprinting with given parameters.

        Args:
            params: Validated parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None
            stopped_flag: () -> bool (returns True if operation should stop)

        Returns:
            Tuple of (fingerprinted_files, matching_groups, statistics).
            Files that could not be read are left out of the first list and
            reported in statistics.failed_files.

        Raises:
            RuntimeError: If the root directory is invalid or no files match
        """
        stats = FingerprintStats()

        # Step 1: Scan
        start = time.time()
        scanner = FileScannerImpl(
            root_dir=params.root_dir,
            min_size=params.min_size_bytes,
            max_size=params.max_size_bytes,
            extensions=params.extensions,
            excluded_dirs=params.excluded_dirs
        )
        scanned = scanner.scan(stopped_flag=stopped_flag, progress_callback=progress_callback)
        stats.scan_time = time.time() - start
        stats.total_files = len(scanned)

        if not scanned and stopped_flag and stopped_flag():
            logger.debug("Scan cancelled, nothing to fingerprint")
            self._files = []
            return [], [], stats

        if not scanned:
            raise RuntimeError("No files found matching filters")

        # Step 2: Fingerprint
        start = time.time()
        self._files = self._fingerprint_files(scanned, params, stats, progress_callback, stopped_flag)
        stats.fingerprint_time = time.time() - start

        # Step 3: Group
        groups: List[FingerprintGroup] = []
        if params.find_duplicates and not (stopped_flag and stopped_flag()):
            start = time.time()
            groups = self._grouper.find_groups(self._files, exact=params.exact)
            stats.group_time = time.time() - start
            stats.groups_found = len(groups)

        logger.debug(f"Fingerprinted {stats.fingerprinted_files}/{stats.total_files} files, "
                     f"{len(stats.failed_files)} failed, {stats.groups_found} groups")
        return self.get_files(), groups, stats

    @staticmethod
    def _fingerprint_files(
            files: List[FingerprintedFile],
            params: FingerprintParams,
            stats: FingerprintStats,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]],
            stopped_flag: Optional[Callable[[], bool]]
    ) -> List[FingerprintedFile]:
        fingerprinter = FingerprinterImpl(params.mode)
        done: List[FingerprintedFile] = []
        total = len(files)

        for index, file in enumerate(files, 1):
            if stopped_flag and stopped_flag():
                logger.debug("Fingerprinting interrupted by user")
                break
            try:
                file.fingerprint = fingerprinter.compute_file(file.path)
            except OSError as e:
                logger.warning(f"Could not fingerprint {file.path}: {e}")
                stats.record_failure(file.path, e)
            else:
                done.append(file)
                stats.fingerprinted_files += 1
                stats.total_bytes += file.size

            if progress_callback and (index % PROGRESS_INTERVAL == 0 or index == total):
                progress_callback('fingerprinting', index, total)

        return done

    def get_files(self) -> List[FingerprintedFile]:
        """Get fingerprinted files after execution."""
        return self._files.copy()
