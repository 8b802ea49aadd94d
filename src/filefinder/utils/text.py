"""Text helpers for file names and human readable sizes."""

from __future__ import annotations

import re
from decimal import Decimal

_SIZE_UNITS = {
    "": 1,
    "B": 1,
    "K": 1024,
    "KB": 1024,
    "M": 1024**2,
    "MB": 1024**2,
    "G": 1024**3,
    "GB": 1024**3,
    "T": 1024**4,
    "TB": 1024**4,
}
_SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([A-Za-z]*)\s*$")


def normalize_name(name: str) -> str:
    """Return the canonical case-insensitive form of a file name."""
    return name.casefold()


def parse_size(text: str) -> int:
    """Parse a size such as ``"512"``, ``"10K"`` or ``"1.5MB"`` into bytes.

    Units are binary (1K == 1024 bytes). Raises ``ValueError`` on malformed
    input.
    """
    match = _SIZE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Invalid size: {text!r}")

    number, unit = match.groups()
    multiplier = _SIZE_UNITS.get(unit.upper())
    if multiplier is None:
        raise ValueError(f"Unknown size unit {unit!r} in {text!r}")
    return int(Decimal(number) * multiplier)


def format_size(size: int) -> str:
    """Format a byte count for display."""
    value = float(size)
    for unit in ("B", "KB", "MB", "GB"):
        if value < 1024:
            return f"{int(value)} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} TB"
