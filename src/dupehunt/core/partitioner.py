"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/partitioner.py
Static split of the candidate list into one contiguous chunk per worker.

The list is cut into slices of len(paths) // workers items; when the division
leaves a remainder there are more slices than workers, and the trailing slices
are folded into the last kept one until exactly `workers` chunks remain.
Chunks never overlap, never leave a gap and are never empty.
"""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


class Partitioner:
    """Splits an ordered sequence into contiguous, disjoint work chunks."""

    @staticmethod
    def split(items: Sequence[T], workers: int) -> List[List[T]]:
        """
        Args:
            items: Ordered candidates (read-only, shared)
            workers: Requested number of workers, >= 1
        Returns:
            min(workers, len(items)) chunks whose concatenation equals items
        Raises:
            ValueError: If workers < 1
        """
        if workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {workers}")

        total = len(items)
        if total == 0:
            return []

        chunk_size = max(1, total // workers)
        chunks = [list(items[i:i + chunk_size]) for i in range(0, total, chunk_size)]

        # Fold the remainder slices into the tail
        while len(chunks) > workers:
            tail = chunks.pop()
            chunks[-1].extend(tail)

        return chunks
