"""
Unified command orchestrator for duplicate detection.
This is the single source of truth for the scan → hash → group workflow.
Pure Python, no terminal I/O.
"""
from typing import List, Optional, Callable, Tuple
from dupehunt.core.models import DuplicateGroup, DeduplicationStats, DeduplicationParams, Stage
from dupehunt.core.scanner import FileScannerImpl
from dupehunt.core.hasher import HasherImpl, get_algorithm
from dupehunt.core.deduplicator import DeduplicatorImpl
import time


class DeduplicationCommand:
    """
    Orchestrates the entire workflow:
    1. Select the hash algorithm once
    2. Collect candidate files under every root
    3. Hash them concurrently and group equal hashes

    Usage:
        params = DeduplicationParams(working_dir=os.getcwd(), cpu_count=os.cpu_count(), roots=[...])
        command = DeduplicationCommand()
        groups, stats = command.execute(params, progress_callback=cli_progress_printer)
    """

    def __init__(self):
        self.algorithm_name: Optional[str] = None

    def execute(
            self,
            params: DeduplicationParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[List[DuplicateGroup], DeduplicationStats]:
        """
        Execute duplicate detection with given parameters.

        Args:
            params: Validated parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Tuple of (duplicate_groups, statistics)

        Raises:
            RuntimeError: If no candidate files were collected
        """
        algorithm = get_algorithm(params.algorithm)
        self.algorithm_name = algorithm.name

        # Step 1: collect candidates
        start_time = time.time()
        scanner = FileScannerImpl(
            roots=params.roots,
            working_dir=params.working_dir,
            exclude_patterns=params.exclude_patterns,
            skip_empty=params.skip_empty,
            max_size=params.max_size_bytes
        )
        files = scanner.scan(progress_callback=progress_callback)
        scan_time = time.time() - start_time

        if not files:
            raise RuntimeError("No files found matching filters")

        # Step 2: hash and group
        deduplicator = DeduplicatorImpl(HasherImpl(algorithm))
        groups, stats = deduplicator.find_duplicates(
            files,
            threads=params.effective_threads,
            sort_order=params.sort_order,
            progress_callback=progress_callback
        )

        stats.files_scanned = len(files)
        stats.stage_stats = {
            Stage.SCAN.value: {"items": len(files), "time": scan_time},
            **stats.stage_stats,
        }
        stats.total_time += scan_time
        return groups, stats

