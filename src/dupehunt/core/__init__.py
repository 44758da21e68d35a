"""
Core duplicate detection engine — scanner, hash algorithms, partitioner, worker pool and grouper.

This package contains the performance-critical foundation of dupehunt:
- FileScannerImpl: multi-root traversal with glob and size filters
- HashAlgorithmName + get_algorithm: pluggable digest functions selected by name
- Partitioner: static split of the candidate list into one chunk per worker
- HashWorkerPool: concurrent full-content hashing, one thread per chunk
- DuplicateGrouperImpl: merge of per-worker maps and grouping by hash
- DeduplicatorImpl: pipeline orchestrator (partition → hash → group)
- Models: File, DuplicateGroup, and configuration objects

All components are pure Python with no UI dependencies.
"""

from .scanner import FileScannerImpl
from .hasher import (
    HasherImpl, HashAlgorithmName, DEFAULT_HASH_ALGORITHM, get_algorithm, resolve_algorithm_name)
from .partitioner import Partitioner
from .worker_pool import HashWorkerPool, ChunkResult
from .grouper import DuplicateGrouperImpl
from .deduplicator import Deduplicator, DeduplicatorImpl
from .sorter import Sorter
from .models import (
    File, SkippedFile, DuplicateGroup, DeduplicationParams, DeduplicationStats,
    SortOrder, OutputFormat, RemovalMethod)

__all__ = [
    "FileScannerImpl",
    "HasherImpl",
    "HashAlgorithmName",
    "DEFAULT_HASH_ALGORITHM",
    "get_algorithm",
    "resolve_algorithm_name",
    "Partitioner",
    "HashWorkerPool",
    "ChunkResult",
    "DuplicateGrouperImpl",
    "Deduplicator",
    "DeduplicatorImpl",
    "Sorter",
    "File",
    "SkippedFile",
    "DuplicateGroup",
    "DeduplicationParams",
    "DeduplicationStats",
    "SortOrder",
    "OutputFormat",
    "RemovalMethod",
]
