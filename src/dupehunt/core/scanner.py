"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Collects candidate files under one or more root directories.
Features:
- Walks every root depth-first with os.scandir (same order as os.walk, topdown)
- Applies glob exclusions to the raw root string, and to each file's full path and base name
- Applies skip-empty / max-size filters, stat'ing files only when such a filter is active
- Returns absolute, normalized paths in traversal order (no sorting), each path at most once
"""

import os
import time
import fnmatch
import logging
from typing import List, Optional, Callable, Iterator

logger = logging.getLogger(__name__)

# Local imports
from dupehunt.core.interfaces import FileScanner


class FileScannerImpl(FileScanner):
    """
    Scans root directories recursively and filters files by glob patterns and size.

    Attributes:
        roots: Root directories as given by the caller (relative roots resolve against working_dir)
        working_dir: Directory used to absolutize relative roots
        exclude_patterns: Shell-style globs (e.g. "*.tmp", "*/.git/*")
        skip_empty: Drop zero-byte files
        max_size: Drop files larger than this many bytes (optional)
    """

    def __init__(
        self,
        roots: List[str],
        working_dir: str,
        exclude_patterns: Optional[List[str]] = None,
        skip_empty: bool = False,
        max_size: Optional[int] = None
    ):
        self.roots = list(roots)
        self.working_dir = working_dir
        self.exclude_patterns = list(exclude_patterns) if exclude_patterns else []
        self.skip_empty = skip_empty
        self.max_size = max_size

    @property
    def needs_stat(self) -> bool:
        """True when at least one size filter is active."""
        return self.skip_empty or self.max_size is not None

    def scan(self,
             progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None) -> List[str]:
        """
        Walk every root and return the surviving candidate paths.
        Missing roots are logged and skipped; the scan goes on with the next root.
        """
        logger.debug(f"Roots: {self.roots}")
        logger.debug(f"Filters: exclude={self.exclude_patterns}, "
                     f"skip_empty={self.skip_empty}, max_size={self.max_size}")

        found_files: List[str] = []
        seen = set()
        processed_files = 0
        start_time = time.time()

        # Progress throttling: update every N files
        progress_interval = 5000
        progress_counter = 0

        for raw_root in self.roots:
            root_path = self._resolve_root(raw_root)
            if root_path is None:
                continue

            logger.debug(f"Scanning directory: {root_path}")
            for path, entry in self._walk(root_path):
                if path in seen:
                    logger.debug(f"Already collected through another root: {path}")
                    continue
                processed_files += 1
                progress_counter += 1
                if self._accept(path, entry):
                    found_files.append(path)
                    seen.add(path)

                if progress_callback and progress_counter >= progress_interval:
                    progress_callback('scanning', processed_files, None)
                    progress_counter = 0

        # Final update for small datasets
        if progress_callback and progress_counter > 0:
            progress_callback('scanning', processed_files, None)

        logger.debug(f"Total scan time: {time.time() - start_time:.2f} seconds")
        logger.debug(f"Scan completed. Found {len(found_files)} of {processed_files} files.")
        return found_files

    def _resolve_root(self, raw_root: str) -> Optional[str]:
        """Returns the absolute root path, or None if the root must be skipped."""
        if self._matches_any(raw_root):
            logger.info(f"Skipping excluded root: {raw_root}")
            return None

        root_path = os.path.normpath(
            os.path.join(self.working_dir, os.path.expanduser(raw_root))
        )
        if not os.path.isdir(root_path):
            logger.warning(f"Not an existing directory, skipping: {raw_root}")
            return None
        return root_path

    @staticmethod
    def _walk(root_path: str) -> Iterator:
        """
        Yields (path, DirEntry) for every regular file under root_path.
        Symlinks are neither followed nor reported. Unreadable directories are logged and skipped.
        """
        stack = [root_path]
        while stack:
            current = stack.pop()
            try:
                with os.scandir(current) as it:
                    entries = list(it)
            except OSError as e:
                logger.warning(f"Cannot read directory {current}: {e}")
                continue

            subdirs = []
            for entry in entries:
                try:
                    if entry.is_symlink():
                        logger.debug(f"Skipping symbolic link: {entry.path}")
                    elif entry.is_dir(follow_symlinks=False):
                        subdirs.append(entry.path)
                    elif entry.is_file(follow_symlinks=False):
                        yield entry.path, entry
                except OSError as e:
                    logger.debug(f"Could not inspect {entry.path}: {e}")

            # Reverse so the first subdirectory is visited first
            stack.extend(reversed(subdirs))

    def _accept(self, path: str, entry: os.DirEntry) -> bool:
        """Check a single file against the exclusion patterns and size filters."""
        if self._matches_any(path) or self._matches_any(entry.name):
            logger.debug(f"Skipping {path} (excluded by pattern)")
            return False

        if not self.needs_stat:
            return True

        try:
            size = entry.stat(follow_symlinks=False).st_size
        except OSError as e:
            logger.warning(f"Could not get size of {path}: {e}")
            return False

        if not self._size_passes(size):
            logger.debug(f"Skipping {path} (size {size} bytes filtered)")
            return False
        return True

    def _matches_any(self, name: str) -> bool:
        return any(fnmatch.fnmatch(name, pattern) for pattern in self.exclude_patterns)

    def _size_passes(self, size: int) -> bool:
        """
        Check if file size is within configured limits.
        Args:
            size: File size in bytes
        Returns:
            True if file meets size criteria
        """
        if self.skip_empty and size == 0:
            return False
        if self.max_size is not None and size > self.max_size:
            return False
        return True
