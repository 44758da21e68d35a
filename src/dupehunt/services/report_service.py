"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/report_service.py
Renders duplicate groups as brief lines, human-readable blocks or JSON.
"""
import json
from typing import List, Dict, Any, Callable

from dupehunt.core.models import DuplicateGroup, File
from dupehunt.services.file_service import FileService
from dupehunt.utils.convert_utils import ConvertUtils

BOLD = "\033[1m"
RESET = "\033[0m"


class ReportService:
    """
    Every group and every member appears exactly once, in group order.
    Metadata is looked up through `describe` (FileService.describe by default).
    """

    def __init__(self, describe: Callable[[str], File] = None):
        self.describe = describe or FileService.describe

    @staticmethod
    def brief_lines(groups: List[DuplicateGroup]) -> List[str]:
        """One `<hash>:<path>` line per file."""
        return [
            f"{group.hash}:{ConvertUtils.printable_path(path)}"
            for group in groups for path in group.paths
        ]

    def human_lines(self, groups: List[DuplicateGroup], bold: bool = False) -> List[str]:
        """A header per group, then `<mtime>\\t<size>\\t<path>` per file."""
        lines = []
        for group in groups:
            files = [self.describe(path) for path in group.paths]
            total_size = sum(f.size for f in files if f.size is not None)
            header = (f"{group.hash} ({group.duplicate_count} files, "
                      f"{ConvertUtils.bytes_to_human(total_size)})")
            lines.append(f"{BOLD}{header}{RESET}" if bold else header)

            for f in files:
                size = f.size if f.size is not None else "?"
                path = ConvertUtils.printable_path(f.path)
                lines.append(f"\t{ConvertUtils.timestamp_to_human(f.mtime)}\t{size}\t{path}")
        return lines

    def to_dict(self, groups: List[DuplicateGroup], algorithm_name: str) -> Dict[str, Any]:
        """JSON-ready structure: {hash_fn, data: [{hash, total, files: [{path, size, mtime}]}]}."""
        return {
            "hash_fn": algorithm_name,
            "data": [
                {
                    "hash": group.hash,
                    "total": group.duplicate_count,
                    "files": [self.describe(path).to_dict() for path in group.paths],
                }
                for group in groups
            ],
        }

    def to_json(self, groups: List[DuplicateGroup], algorithm_name: str) -> str:
        """ASCII-escaped, so undecodable path bytes survive as \\udcXX and round-trip through os.fsencode."""
        return json.dumps(self.to_dict(groups, algorithm_name), indent=2)
