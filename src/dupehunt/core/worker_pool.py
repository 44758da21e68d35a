"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/worker_pool.py
Concurrent full-content hashing: one worker thread per work chunk.

Every worker builds its own path -> hash map for the chunk it owns, so no state
is shared between threads and nothing needs a lock. The pool blocks until all
workers have returned and hands back the results in chunk order.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Callable

from dupehunt.core.interfaces import Hasher
from dupehunt.core.models import SkippedFile

logger = logging.getLogger(__name__)


@dataclass
class ChunkResult:
    """Output of one worker: hashes for readable files, reasons for the rest."""
    hashes: Dict[str, str] = field(default_factory=dict)
    skipped: List[SkippedFile] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.hashes) + len(self.skipped)


class HashWorkerPool:
    """
    Runs one hashing worker per chunk on a fixed-size thread pool.
    File reads and hashing are blocking; there is no cancellation or timeout.
    """

    def __init__(self, hasher: Hasher):
        self.hasher = hasher

    def hash_chunk(self, chunk: List[str]) -> ChunkResult:
        """
        Hash every file of a chunk. A file that cannot be read is skipped with a warning;
        it never stops the worker.
        """
        result = ChunkResult()
        for path in chunk:
            try:
                result.hashes[path] = self.hasher.compute_full_hash(path)
            except OSError as e:
                logger.warning(f"Skipping unreadable file {path}: {e}")
                result.skipped.append(SkippedFile(path=path, reason=str(e)))
        return result

    def run(
            self,
            chunks: List[List[str]],
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[ChunkResult]:
        """
        Hash all chunks concurrently and wait for every worker to finish.

        Args:
            chunks: Disjoint work chunks, one per worker
            progress_callback: Called from the calling thread as chunks complete
        Returns:
            One ChunkResult per chunk, in the same order as `chunks`
        """
        if not chunks:
            return []

        total = sum(len(chunk) for chunk in chunks)
        results: List[Optional[ChunkResult]] = [None] * len(chunks)
        done = 0

        logger.debug(f"Dispatching {len(chunks)} workers for {total} files")
        with ThreadPoolExecutor(max_workers=len(chunks), thread_name_prefix="hash-worker") as executor:
            futures = {
                executor.submit(self.hash_chunk, chunk): index
                for index, chunk in enumerate(chunks)
            }
            for future in as_completed(futures):
                index = futures[future]
                results[index] = future.result()
                done += results[index].processed
                if progress_callback:
                    progress_callback('hashing', done, total)

        return results
