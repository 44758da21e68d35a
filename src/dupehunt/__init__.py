"""
dupehunt — multi-threaded duplicate file finder.

Core features:
- Multi-root traversal with glob exclusions, skip-empty and max-size filters
- Full-content hashing with a selectable algorithm (crc32, xxhash, xxh3, md5, sha1, sha256, sha512, blake3)
- Static partitioning of the candidate list across a fixed number of worker threads
- Plain, human-readable and JSON reports
- Removal of all but one copy per group, optionally interactive or to the system trash
"""

from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("dupehunt")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from dupehunt.commands import DeduplicationCommand
from dupehunt.core import DeduplicationParams, SortOrder, File, DuplicateGroup, HashAlgorithmName
from dupehunt.utils.convert_utils import ConvertUtils
from dupehunt.services import DuplicateService, ReportService
from dupehunt.services.file_service import FileService

__all__ = [
    "DeduplicationCommand",
    "DeduplicationParams",
    "SortOrder",
    "File",
    "DuplicateGroup",
    "HashAlgorithmName",
    "ConvertUtils",
    "DuplicateService",
    "ReportService",
    "FileService",
    "__version__",
]
