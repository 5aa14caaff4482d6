"""
Entry id generation.

Numeric ids are derived from the largest existing id that parses as an integer.
Ids that do not parse (manual names like "johnstone") are ignored when computing
the next numeric id.
"""
from typing import Collection, Optional


def _as_int(entry_id: str) -> Optional[int]:
    try:
        return int(entry_id)
    except (TypeError, ValueError):
        return None


def next_numeric_id(ids: Collection[str]) -> int:
    """Return max(integer ids) + 1, or 0 when no id is an integer."""
    numeric = [n for n in (_as_int(entry_id) for entry_id in ids) if n is not None]
    return max(numeric) + 1 if numeric else 0


def resolve_entry_id(ids: Collection[str], requested: Optional[str] = None) -> str:
    """
    Pick the id for a new entry.

    A requested id is used verbatim unless it is already taken; otherwise the
    next numeric id is used, skipping any string form that is already present.
    """
    if requested is not None and requested not in ids:
        return requested

    candidate = next_numeric_id(ids)
    while str(candidate) in ids:
        candidate += 1
    return str(candidate)
