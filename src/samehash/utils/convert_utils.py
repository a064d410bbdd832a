"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Conversions between byte counts and human-readable size strings.
"""
import re

_UNITS = ["B", "KB", "MB", "GB", "TB", "PB"]

# Both full (KB) and short (K) suffixes, binary multiples
_MULTIPLIERS = {
    "PB": 1024 ** 5, "P": 1024 ** 5,
    "TB": 1024 ** 4, "T": 1024 ** 4,
    "GB": 1024 ** 3, "G": 1024 ** 3,
    "MB": 1024 ** 2, "M": 1024 ** 2,
    "KB": 1024, "K": 1024,
    "B": 1, "": 1,
}

_SIZE_PATTERN = re.compile(r"^(-?\d+(?:\.\d+)?)\s*([KMGTP]?B?)$")


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 512.00B, 1.50KB, 3.20MB).
        """
        if size_bytes < 0:
            return "0B"

        value = float(size_bytes)
        for unit in _UNITS:
            if value < 1024:
                return f"{value:.2f}{unit}"
            value /= 1024
        return f"{value:.2f}EB"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Convert human-readable size string to bytes.
        Supports formats: '64K', '1.5MB', '4096', '4096B'.
        Raises ValueError for negative sizes or invalid formats.
        """
        normalized = size_str.strip().upper()
        match = _SIZE_PATTERN.match(normalized)
        if not match:
            raise ValueError(
                f"Invalid size format: '{size_str.strip()}'. "
                f"Supported formats: 64K, 1.5MB, 4096, 4096B, etc."
            )

        number, unit = match.groups()
        value = float(number)
        if value < 0:
            raise ValueError(f"Negative size not allowed: '{size_str.strip()}'")
        return int(value * _MULTIPLIERS[unit])

    @staticmethod
    def is_valid_size_format(size_str: str) -> bool:
        """
        Check if the input string has a valid size format.
        """
        try:
            ConvertUtils.human_to_bytes(size_str)
            return True
        except ValueError:
            return False
