"""
Merge utilities for partial entry updates.
"""
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Optional

# (existing field value, incoming field value) -> resolved value, or None to fall back
Customizer = Callable[[Any, Any], Any]


def merge_partials(
    existing: Any,
    partials: Iterable[Mapping],
    customizer: Optional[Customizer] = None
) -> Dict[str, Any]:
    """
    Shallow-merge partials into an existing value, left to right.

    Later partials win per key. With a customizer, each incoming field is
    resolved by customizer(existing_field, incoming_field), where existing_field
    is None for keys not yet present; a None result falls back to the incoming
    value. Neither ``existing`` nor the partials are modified.

    Raises:
        TypeError: If the existing value or a partial is not a mapping
    """
    if not isinstance(existing, Mapping):
        raise TypeError(f"Cannot patch a value of type {type(existing).__name__}, expected a mapping")

    merged = dict(existing)
    for partial in partials:
        if not isinstance(partial, Mapping):
            raise TypeError(f"Patch partials must be mappings, got {type(partial).__name__}")

        for key, incoming in partial.items():
            resolved = None
            if customizer is not None:
                resolved = customizer(merged.get(key), incoming)
            merged[key] = incoming if resolved is None else resolved

    return merged
