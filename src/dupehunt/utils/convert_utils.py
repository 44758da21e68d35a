"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Size, timestamp and path-text conversions used by the CLI and reports.
"""
import os
import time
from typing import Optional

# Longest suffix first so 'KB' is not read as 'K' + 'B'
_UNITS = {
    'TB': 1024 ** 4, 'T': 1024 ** 4,
    'GB': 1024 ** 3, 'G': 1024 ** 3,
    'MB': 1024 ** 2, 'M': 1024 ** 2,
    'KB': 1024, 'K': 1024,
    'B': 1,
}


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: Optional[int]) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.50KB, 3.20MB).
        """
        if size_bytes is None or size_bytes < 0:
            return "?"
        if size_bytes < 1024:
            return f"{size_bytes}B"

        size = float(size_bytes)
        for unit in ["B", "KB", "MB", "GB", "TB"]:
            if size < 1024:
                return f"{size:.2f}{unit}"
            size /= 1024
        return f"{size:.2f}PB"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Convert a size string to bytes.
        Supports plain byte counts ('1000') and binary units ('1.5GB', '500K', '10MB').
        Raises ValueError for negative sizes or invalid formats.
        """
        size_str = str(size_str).strip().upper()
        if not size_str:
            raise ValueError("Empty size value")

        for unit in sorted(_UNITS, key=len, reverse=True):
            if size_str.endswith(unit):
                value_str = size_str[:-len(unit)].strip()
                try:
                    value = float(value_str)
                except ValueError:
                    raise ValueError(f"Invalid numeric value in size: '{value_str}'")
                if value < 0:
                    raise ValueError(f"Negative size not allowed: '{size_str}'")
                return int(value * _UNITS[unit])

        try:
            value = int(size_str)
        except ValueError:
            raise ValueError(
                f"Invalid size format: '{size_str}'. "
                f"Supported formats: 1000, 500K, 10MB, 1.5GB"
            )
        if value < 0:
            raise ValueError(f"Negative size not allowed: '{size_str}'")
        return value

    @staticmethod
    def printable_path(path: str) -> str:
        """
        Path text that can always be printed.
        Bytes that are not valid UTF-8 (kept by Python as surrogates) are shown as \\xNN escapes.
        """
        return os.fsencode(path).decode("utf-8", "backslashreplace")

    @staticmethod
    def timestamp_to_human(timestamp: Optional[float], fmt: str = "%Y-%m-%d %H:%M:%S") -> str:
        """
        Convert a Unix timestamp to local time, '?' when unknown.
        """
        if timestamp is None:
            return "?"
        try:
            return time.strftime(fmt, time.localtime(timestamp))
        except (OverflowError, OSError, ValueError):
            return "?"
