"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate search.
These protocols enforce structural typing using Python's `typing.Protocol` to ensure
consistency across modules while maintaining flexibility and modularity.

Key Components:
---------------
- HashAlgorithm: Standardized interface for digest functions (crc32, xxHash, SHA-2, BLAKE3...).
- Hasher: Interface for hashing the full content of one file.
- FileScanner: Interface for collecting candidate paths under a set of roots.
- DuplicateGrouper: Interface for merging per-worker hash maps and grouping equal hashes.
- Deduplicator: Interface for the engine coordinating partitioning, hashing and grouping.
"""

from typing import Protocol, List, Dict, Tuple, Optional, Callable
from dupehunt.core.models import DuplicateGroup, DeduplicationStats, SortOrder


# ===== Interfaces =====

class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256, MD5, or xxHash
    without affecting the rest of the deduplication logic.
    """
    name: str

    def hexdigest(self, data: bytes) -> str:
        """Computes the fixed-width hexadecimal digest of the provided byte data."""
        ...


class Hasher(Protocol):
    """Interface for hashing a whole file."""
    def compute_full_hash(self, path: str) -> str: ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and collecting candidate paths.

    Methods:
        scan: Returns absolute, normalized paths in traversal order.
    """
    def scan(
        self,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[str]:
        ...


class DuplicateGrouper(Protocol):
    """
    Interface for turning hash maps into duplicate groups.
    """
    def merge(self, maps: List[Dict[str, str]]) -> Dict[str, str]:
        """Union of disjoint per-worker maps, preserving their order."""
        ...

    def group(self, file_hashes: Dict[str, str]) -> List[DuplicateGroup]:
        """Groups paths sharing a hash, dropping single-file groups."""
        ...


class Deduplicator(Protocol):
    """
    Interface for the main deduplication engine.

    Coordinates partitioning, concurrent hashing and grouping.
    """
    def find_duplicates(
        self,
        paths: List[str],
        threads: int,
        sort_order: SortOrder = SortOrder.DISCOVERY,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[List[DuplicateGroup], DeduplicationStats]:
        """
        Run the full pipeline over the candidate paths.

        Args:
            paths: Candidate paths produced by a FileScanner.
            threads: Number of concurrent workers (>= 1).
            sort_order: Ordering of paths inside each group.
            progress_callback: Optional callback for progress updates (stage, current, total).

        Returns:
            A tuple of (duplicate groups, statistics collected during processing)
        """
        ...
