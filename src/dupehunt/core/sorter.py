"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorter.py
Pure sorting logic for duplicate groups — zero dependencies outside core.
The first path of each group after sorting is the one kept in removal mode.
"""
import os
from typing import List
from dupehunt.core.models import DuplicateGroup, SortOrder


class Sorter:
    """
    Sorts paths inside duplicate groups according to the specified order.
    Modifies groups in-place.
    - DISCOVERY: leave the encounter order untouched (traversal order)
    - PATH: lexicographic by absolute path
    - SHORTEST_PATH: fewest path components first, ties broken lexicographically
    """

    @staticmethod
    def sort_paths_inside_groups(groups: List[DuplicateGroup], sort_order: SortOrder = None) -> None:
        if not groups or sort_order in (None, SortOrder.DISCOVERY):
            return

        if sort_order == SortOrder.SHORTEST_PATH:
            key_func = lambda p: (p.rstrip(os.sep).count(os.sep), p)
        else:
            key_func = None

        for group in groups:
            group.paths.sort(key=key_func)
