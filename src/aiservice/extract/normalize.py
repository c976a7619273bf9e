from __future__ import annotations

from typing import Optional


def to_bool(raw: Optional[str]) -> bool:
    # Only the exact literal counts; "TRUE", "True " and "false" are all False.
    return raw == "true"


def to_list(raw: Optional[str]) -> list[str]:
    """Split a comma-delimited value into trimmed, lowercased items."""
    if raw is None:
        return []
    return [item.strip().lower() for item in raw.split(",")]


def to_unique_list(raw: Optional[str]) -> list[str]:
    """Like ``to_list`` but with duplicates removed (first occurrence kept)."""
    return list(dict.fromkeys(to_list(raw)))


def identity(raw: Optional[str]) -> Optional[str]:
    return raw
