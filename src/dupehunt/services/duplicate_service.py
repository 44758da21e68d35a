"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/duplicate_service.py
Removal policy for duplicate groups: keep the first path of every group, remove the rest.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Tuple, Callable, Optional

from dupehunt.core.models import DuplicateGroup

logger = logging.getLogger(__name__)


@dataclass
class RemovalResult:
    """Outcome of a removal run."""
    deleted: List[str] = field(default_factory=list)
    declined: List[str] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)  # (path, error)
    bytes_freed: int = 0

    @property
    def attempted(self) -> int:
        return len(self.deleted) + len(self.failed)


class DuplicateService:
    @staticmethod
    def keep_only_one_file_per_group(groups: List[DuplicateGroup]) -> List[str]:
        """
        Keeps the first file of every group and marks the rest for deletion.
        Nothing is touched on disk; used for the removal preview and --dry-run.
        """
        return [path for group in groups for path in group.redundant]

    @staticmethod
    def remove_duplicates(
            groups: List[DuplicateGroup],
            delete: Callable[[str], None],
            confirm: Optional[Callable[[DuplicateGroup, str], bool]] = None,
            size_of: Optional[Callable[[str], Optional[int]]] = None
    ) -> RemovalResult:
        """
        Removes every path but the first one of each group, sequentially.

        Args:
            groups: Duplicate groups, already in survivor order
            delete: Removes one path; any exception marks that path as failed
            confirm: Asked before each removal; False skips that path only
            size_of: Optional size lookup (taken before removal) for bytes_freed
        Returns:
            RemovalResult listing deleted, declined and failed paths
        """
        result = RemovalResult()

        for group in groups:
            logger.debug(f"Keeping {group.kept}")
            for path in group.redundant:
                if confirm is not None and not confirm(group, path):
                    logger.debug(f"Removal declined: {path}")
                    result.declined.append(path)
                    continue

                size = size_of(path) if size_of else None
                try:
                    delete(path)
                except Exception as e:
                    logger.warning(f"Failed to delete {path}: {e}")
                    result.failed.append((path, str(e)))
                    continue

                result.deleted.append(path)
                if size:
                    result.bytes_freed += size

        return result
