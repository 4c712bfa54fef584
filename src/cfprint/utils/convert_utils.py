"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Size conversions for CLI filters and summaries (binary units, 1K = 1024 bytes).
"""
import re

_SIZE_PATTERN = re.compile(r"^\s*(?P<value>[-+]?\d+(?:\.\d*)?|[-+]?\.\d+)\s*(?P<unit>[KMGTP]?B?)\s*$", re.IGNORECASE)
_UNIT_POWERS = {"": 0, "K": 1, "M": 2, "G": 3, "T": 4, "P": 5}
_HUMAN_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """Render a byte count as e.g. '512.00B', '1.50KB', '3.20MB'."""
        if size_bytes < 0:
            return "0B"

        value = float(size_bytes)
        for unit in _HUMAN_UNITS:
            if value < 1024:
                return f"{value:.2f}{unit}"
            value /= 1024
        return f"{value:.2f}EB"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Parse '1.5GB', '2048KB', '1000', '1K', '10m' and similar into bytes.

        Raises:
            ValueError: For negative sizes or unparseable input
        """
        match = _SIZE_PATTERN.match(size_str)
        if not match:
            raise ValueError(
                f"Invalid size format: '{size_str}'. "
                f"Supported formats: 1.5GB, 2048KB, 1000, 1K, 1M, etc."
            )

        value = float(match.group("value"))
        if value < 0:
            raise ValueError(f"Negative size not allowed: '{size_str.strip()}'")

        prefix = match.group("unit").upper().rstrip("B")
        return int(value * 1024 ** _UNIT_POWERS[prefix])

