"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models and run configuration for duplicate detection.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Union
from enum import Enum


# =============================
# Enums
# =============================

class SortOrder(Enum):
    """
    Order of paths inside a duplicate group.
    The first path of a group is the copy kept in removal mode.
    """
    DISCOVERY = "discovery"
    PATH = "path"
    SHORTEST_PATH = "shortest-path"


class OutputFormat(Enum):
    HUMAN = "human"
    BRIEF = "brief"
    JSON = "json"


class RemovalMethod(Enum):
    DELETE = "delete"
    TRASH = "trash"


class Stage(str, Enum):
    SCAN = "scan"
    PARTITION = "partition"
    HASH = "hash"
    GROUP = "group"


# ======================
#  Core Data Models
# ======================

@dataclass
class File:
    """
    Metadata of a single file, as reported to the user.
    size and mtime are None when the file could not be stat'ed.
    """
    path: str
    size: Optional[int] = None  # in bytes
    mtime: Optional[float] = None

    def to_dict(self) -> Dict[str, Union[str, int, float, None]]:
        return {"path": self.path, "size": self.size, "mtime": self.mtime}

    def __repr__(self):
        return f"<File path={self.path}, size={self.size}>"


@dataclass(frozen=True)
class SkippedFile:
    """A candidate that could not be hashed and was left out of comparison."""
    path: str
    reason: str


@dataclass
class DuplicateGroup:
    """
    Two or more paths whose content hashes are equal.
    Paths are kept in the order chosen by the grouper (see SortOrder).
    """
    hash: str
    paths: List[str]

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.paths)

    @property
    def kept(self) -> str:
        """The path preserved in removal mode."""
        return self.paths[0]

    @property
    def redundant(self) -> List[str]:
        """Every path after the kept one."""
        return self.paths[1:]

    def __repr__(self):
        return f"<DuplicateGroup hash={self.hash}, count={len(self.paths)}>"


class DeduplicationStats:
    """
    Statistics collected during one run.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.files_scanned: int = 0
        self.files_hashed: int = 0
        self.workers: int = 0
        self.skipped: List[SkippedFile] = []
        self.stage_stats: Dict[str, Dict[str, Union[int, float]]] = {}

    def update_stage(
            self,
            stage_name: str,
            items: int,
            duration: float
    ) -> None:
        if stage_name not in self.stage_stats:
            self.stage_stats[stage_name] = {"items": 0, "time": 0.0}
        self.stage_stats[stage_name]["items"] += items
        self.stage_stats[stage_name]["time"] += duration

    def print_summary(self) -> str:
        labels = {
            Stage.SCAN.value: "Scanned files",
            Stage.PARTITION.value: "Work chunks",
            Stage.HASH.value: "Hashed files",
            Stage.GROUP.value: "Duplicate groups",
        }

        lines = [
            "Deduplication Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Workers: {self.workers}, skipped (unreadable): {len(self.skipped)}\n",
            "Stage: ITEMS / TIME",
        ]

        for stage, data in self.stage_stats.items():
            label = labels.get(stage, stage.title())
            lines.append(f"{label}: {data['items']} / {data['time']:.3f}s")

        return "\n".join(lines)


"""
DTO for run parameters with built-in validation.
Interface-agnostic: process-wide state (cwd, CPU count) is passed in explicitly.
"""

DEFAULT_ALGORITHM = "xxhash"


@dataclass
class DeduplicationParams:
    """Parameters for a duplicate search with validation."""
    working_dir: str
    cpu_count: int = 1
    roots: List[str] = field(default_factory=list)
    threads: Optional[int] = None
    exclude_patterns: List[str] = field(default_factory=list)
    skip_empty: bool = False
    max_size_bytes: Optional[int] = None
    algorithm: str = DEFAULT_ALGORITHM
    sort_order: SortOrder = SortOrder.DISCOVERY

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.working_dir:
            raise ValueError("Working directory cannot be empty")

        if self.threads is not None and self.threads < 1:
            raise ValueError(f"Thread count must be at least 1, got {self.threads}")

        if self.cpu_count < 1:
            self.cpu_count = 1

        if self.max_size_bytes is not None and self.max_size_bytes < 0:
            raise ValueError("Maximum size cannot be negative")

        if not self.roots:
            self.roots = ["."]  # raw root; the scanner resolves it against working_dir

        self.exclude_patterns = [p for p in self.exclude_patterns if p]

    @property
    def effective_threads(self) -> int:
        """Explicit thread count, or one worker per CPU core."""
        return self.threads if self.threads is not None else self.cpu_count
