"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Implements the duplicate detection pipeline over a list of candidate paths:
    partition → concurrent full hash → merge → group
The grouping stage starts only after every worker has returned.
"""
import time
import logging
from typing import List, Tuple, Optional, Callable

from dupehunt.core.models import DuplicateGroup, DeduplicationStats, SortOrder, Stage
from dupehunt.core.interfaces import Deduplicator, Hasher
from dupehunt.core.hasher import HasherImpl
from dupehunt.core.partitioner import Partitioner
from dupehunt.core.worker_pool import HashWorkerPool
from dupehunt.core.grouper import DuplicateGrouperImpl

logger = logging.getLogger(__name__)


# =============================
# Main Deduplicator Class
# =============================
class DeduplicatorImpl(Deduplicator):
    """
    Runs the hashing pipeline and collects per-stage statistics.
    """
    def __init__(self, hasher: Hasher = None):
        self.hasher = hasher or HasherImpl()

    def find_duplicates(
        self,
        paths: List[str],
        threads: int,
        sort_order: SortOrder = SortOrder.DISCOVERY,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[List[DuplicateGroup], DeduplicationStats]:
        """
        Main deduplication pipeline.
        Args:
            paths: Candidate paths in traversal order
            threads: Number of workers (>= 1)
            sort_order: Order of paths inside each group
            progress_callback (Optional[Callable[[str, int, int], None]]): Reports progress per stage.
        Returns:
            Tuple[List[DuplicateGroup], DeduplicationStats]
        """
        stats = DeduplicationStats()
        total_start_time = time.time()

        # Stage 1: static partitioning
        start_time = time.time()
        chunks = Partitioner.split(paths, threads)
        stats.workers = len(chunks)
        stats.update_stage(Stage.PARTITION.value, len(chunks), time.time() - start_time)
        logger.debug(f"Split {len(paths)} files into {len(chunks)} chunks "
                     f"(requested {threads} workers)")

        # Stage 2: concurrent hashing, barrier-waited
        start_time = time.time()
        results = HashWorkerPool(self.hasher).run(chunks, progress_callback=progress_callback)
        for result in results:
            stats.skipped.extend(result.skipped)
        stats.files_hashed = sum(len(result.hashes) for result in results)
        stats.update_stage(Stage.HASH.value, stats.files_hashed, time.time() - start_time)

        # Stage 3: merge + group (single-threaded)
        start_time = time.time()
        grouper = DuplicateGrouperImpl(sort_order)
        merged = grouper.merge([result.hashes for result in results])
        groups = grouper.group(merged)
        stats.update_stage(Stage.GROUP.value, len(groups), time.time() - start_time)

        stats.total_time = time.time() - total_start_time
        return groups, stats
