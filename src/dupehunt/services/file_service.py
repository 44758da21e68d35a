"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
Filesystem side effects used by the action stage: metadata lookup and file removal.
Removal is either permanent (os.remove) or to the system trash (send2trash).
"""
import os
import logging
from pathlib import Path
from typing import Callable

from send2trash import send2trash

from dupehunt.core.models import File, RemovalMethod

logger = logging.getLogger(__name__)


class FileService:
    """
    Stateless helpers around os / send2trash with uniform error reporting.
    """

    @staticmethod
    def stat_file(file_path: str) -> File:
        """
        Returns size and modification time of a file.

        Raises:
            OSError: If the file cannot be stat'ed
        """
        stat_result = os.stat(file_path)
        return File(path=file_path, size=stat_result.st_size, mtime=stat_result.st_mtime)

    @staticmethod
    def describe(file_path: str) -> File:
        """Like stat_file, but a vanished file yields a File with unknown size/mtime."""
        try:
            return FileService.stat_file(file_path)
        except OSError as e:
            logger.warning(f"Could not stat {file_path}: {e}")
            return File(path=file_path)

    @staticmethod
    def delete_file(file_path: str) -> None:
        """Permanently removes a file."""
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            os.remove(path)
        except OSError as e:
            raise RuntimeError(f"Failed to delete: {e}") from e

    @staticmethod
    def move_to_trash(file_path: str) -> None:
        """Moves a file to the system trash."""
        path = Path(file_path).resolve()

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            send2trash(str(path))
        except Exception as e:
            raise RuntimeError(f"Failed to move to trash: {e}") from e

    @classmethod
    def remover_for(cls, method: RemovalMethod) -> Callable[[str], None]:
        """Returns the removal function for the selected method."""
        if method == RemovalMethod.TRASH:
            return cls.move_to_trash
        return cls.delete_file
