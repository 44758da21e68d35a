"""Removal policy, reporting and filesystem services."""

from .file_service import FileService
from .duplicate_service import DuplicateService, RemovalResult
from .report_service import ReportService

__all__ = ["FileService", "DuplicateService", "RemovalResult", "ReportService"]
