"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Collects candidate files for fingerprinting.
Features:
- Recursively walks a directory tree with os.walk
- Skips symlinks, excluded and inaccessible directories
- Applies size and extension filters
- Returns FingerprintedFile records with the fingerprint still unset
"""

import os
from typing import List, Optional, Callable
from pathlib import Path
import time
import logging

from cfprint.core.models import FingerprintedFile
from cfprint.core.interfaces import FileScanner

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 5000


class FileScannerImpl(FileScanner):
    """
    Scans directories recursively and filters files based on size and extensions.

    Attributes:
        root_dir: Root directory to scan
        min_size: Minimum file size in bytes (optional)
        max_size: Maximum file size in bytes (optional)
        extensions: List of allowed file extensions (e.g., [".jar", ".zip"])
        excluded_dirs: Directories that are never entered
    """

    def __init__(
        self,
        root_dir: str,
        min_size: Optional[int] = None,
        max_size: Optional[int] = None,
        extensions: Optional[List[str]] = None,
        excluded_dirs: Optional[List[str]] = None
    ):
        self.root_dir = root_dir
        self.min_size = min_size
        self.max_size = max_size
        self.extensions = [ext.lower() for ext in extensions] if extensions else []
        self.excluded_dirs = [str(Path(d).resolve()) for d in excluded_dirs] if excluded_dirs else []

    def scan(self,
             stopped_flag: Optional[Callable[[], bool]] = None,
             progress_callback: Optional[Callable[[str, int, object], None]] = None) -> List[FingerprintedFile]:
        """
        Single-pass scan with throttled progress updates.
        Returns files in a stable order (sorted by path).
        """
        logger.debug(f"Root directory: {self.root_dir}")
        logger.debug(f"Filters: min_size={self.min_size}, max_size={self.max_size}, extensions={self.extensions}")

        if stopped_flag and stopped_flag():
            logger.debug("Scan cancelled before start")
            return []

        root_path = Path(self.root_dir)
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)

        found_files = []
        processed_files = 0
        progress_counter = 0
        start_time = time.time()

        try:
            for root, dirs, files in os.walk(str(root_path)):
                if stopped_flag and stopped_flag():
                    logger.debug("Scan interrupted by user")
                    return []

                # Prune before os.walk descends
                dirs[:] = sorted(d for d in dirs if self._dir_passes(Path(root) / d))

                for filename in files:
                    file_info = self._process_file(Path(root) / filename)
                    if file_info:
                        found_files.append(file_info)
                    processed_files += 1
                    progress_counter += 1

                    if progress_callback and progress_counter >= PROGRESS_INTERVAL:
                        progress_callback('scanning', processed_files, None)
                        progress_counter = 0

            if progress_callback and progress_counter > 0:
                progress_callback('scanning', processed_files, None)

        except PermissionError as pe:
            logger.warning(f"Permission denied during scan: {pe}")

        found_files.sort(key=lambda f: f.path)
        logger.debug(f"Scan completed in {time.time() - start_time:.2f}s. "
                     f"Found {len(found_files)} matching files.")
        return found_files

    def _dir_passes(self, path: Path) -> bool:
        """Skip symlinked, excluded and unreadable directories."""
        if path.is_symlink():
            logger.debug(f"Skipping symlinked directory: {path}")
            return False

        if self.excluded_dirs and self._is_excluded_directory(path):
            logger.debug(f"Skipping excluded directory: {path}")
            return False

        try:
            return path.is_dir() and os.access(path, os.R_OK | os.X_OK)
        except OSError:
            logger.debug(f"Skipping inaccessible directory: {path}")
            return False

    def _is_excluded_directory(self, path: Path) -> bool:
        try:
            path_str = str(path.resolve(strict=False))
        except (OSError, ValueError):
            return False
        for excluded_dir in self.excluded_dirs:
            if path_str == excluded_dir or path_str.startswith(excluded_dir + os.sep):
                return True
        return False

    def _process_file(self, path: Path) -> Optional[FingerprintedFile]:
        """Return a FingerprintedFile if `path` passes all filters, else None."""
        try:
            if path.is_symlink():
                logger.debug(f"Skipping symbolic link: {path}")
                return None
            size = path.stat().st_size
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            return None

        if not self._size_passes(size):
            logger.debug(f"Skipping {path} (size {size} bytes outside range)")
            return None

        if not self._extension_passes(path):
            logger.debug(f"Skipping {path} (extension not allowed)")
            return None

        return FingerprintedFile(path=str(path), size=size)

    def _size_passes(self, size: int) -> bool:
        if self.min_size is not None and size < self.min_size:
            return False
        if self.max_size is not None and size > self.max_size:
            return False
        return True

    def _extension_passes(self, path: Path) -> bool:
        if not self.extensions:
            return True
        return path.suffix.lower() in self.extensions
