"""Utility helpers shared across pdfeditx."""

from __future__ import annotations

import logging


def configure_logging(verbose: bool = False) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string such as ``"1.5 MB"``
    """
    if size_bytes <= 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size_bytes)
    unit = units[0]
    for unit in units:
        if value < 1024 or unit == units[-1]:
            break
        value /= 1024
    value = round(value, 2)
    if value.is_integer():
        return f"{int(value)} {unit}"
    return f"{value} {unit}"


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return ``"<count> <noun>"`` with the noun matching ``count``."""
    noun = singular if count == 1 else (plural or f"{singular}s")
    return f"{count} {noun}"
