from dupehunt.core.hasher import HashAlgorithmName, DEFAULT_HASH_ALGORITHM
from dupehunt.core.models import SortOrder

# Process exit codes
EXIT_OK = 0                 # no duplicates, or removal completed
EXIT_DUPLICATES_FOUND = 1   # duplicates reported, nothing removed
EXIT_ERROR = 2              # misconfiguration, no candidate files, unexpected failure
EXIT_INTERRUPTED = 130

HASH_CHOICES = [name.value for name in HashAlgorithmName]

HASH_HELP_TEXT = (
    "Hash algorithm applied to the full content of every file:\n"
    + "".join(f"  {name.value:<8}: {name.description}\n" for name in HashAlgorithmName)
    + f"Unknown names fall back to '{DEFAULT_HASH_ALGORITHM.value}'. Default: {DEFAULT_HASH_ALGORITHM.value}\n"
)

SORT_ALIASES = {
    "discovery": SortOrder.DISCOVERY,
    "path": SortOrder.PATH,
    "shortest-path": SortOrder.SHORTEST_PATH,
}

SORT_CHOICES = list(SORT_ALIASES.keys())

SORT_HELP_TEXT = (
    "Order of files inside a group; the first file is kept by --remove:\n"
    "  discovery     : order in which files were found (default)\n"
    "  path          : alphabetical by full path\n"
    "  shortest-path : files closer to the root first\n"
)

EPILOG_TEXT = """
Exit status:
  0  no duplicates found (or --remove finished)
  1  duplicates found and reported
  2  error: bad options, no files to compare, unexpected failure

Examples:
  Find duplicates in the current directory
  %(prog)s

  Several roots, SHA-256, 8 worker threads
  %(prog)s ~/Photos /mnt/backup/Photos -H sha256 -t 8

  Ignore VCS folders and temp files, skip empty files and files over 100MB
  %(prog)s ~/src -e '*/.git/*' -e '*.tmp' -z -M 100MB

  Machine-readable output
  %(prog)s ~/Downloads --json > report.json

  Delete all but the first copy of every group, asking before each file
  %(prog)s ~/Downloads --remove --prompt
"""
