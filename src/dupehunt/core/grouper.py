"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Merges per-worker hash maps and groups paths that share a hash.
"""

import logging
from collections import defaultdict
from typing import List, Dict

from dupehunt.core.interfaces import DuplicateGrouper
from dupehunt.core.models import DuplicateGroup, SortOrder
from dupehunt.core.sorter import Sorter

logger = logging.getLogger(__name__)


class DuplicateGrouperImpl(DuplicateGrouper):
    """
    Groups paths by identical hash string.

    Groups appear in the order their first member is met in the merged map, and paths
    inside a group keep that same encounter order unless another SortOrder is requested.
    """

    def __init__(self, sort_order: SortOrder = SortOrder.DISCOVERY):
        self.sort_order = sort_order

    @staticmethod
    def merge(maps: List[Dict[str, str]]) -> Dict[str, str]:
        """
        Union of per-worker maps in list order.
        Workers own disjoint chunks, so a repeated key means the partition was broken.
        """
        merged: Dict[str, str] = {}
        for file_hashes in maps:
            for path, digest in file_hashes.items():
                if path in merged:
                    raise RuntimeError(f"Path hashed by more than one worker: {path}")
                merged[path] = digest
        return merged

    def group(self, file_hashes: Dict[str, str]) -> List[DuplicateGroup]:
        """
        Returns one DuplicateGroup per hash shared by two or more paths.
        Args:
            file_hashes: path -> hex digest
        """
        by_hash: Dict[str, List[str]] = defaultdict(list)
        for path, digest in file_hashes.items():
            by_hash[digest].append(path)

        groups = [
            DuplicateGroup(hash=digest, paths=paths)
            for digest, paths in by_hash.items()
            if len(paths) >= 2  # Avoid groups with less than 2 files
        ]

        Sorter.sort_paths_inside_groups(groups, self.sort_order)
        logger.debug(f"Grouped {len(file_hashes)} files into {len(groups)} duplicate groups")
        return groups
