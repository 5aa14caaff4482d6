"""
Utility functions - Pure functions with no dependencies.
These can be used across all layers.
"""
from .ids import next_numeric_id, resolve_entry_id
from .merge import merge_partials, Customizer

__all__ = [
    "next_numeric_id",
    "resolve_entry_id",
    "merge_partials",
    "Customizer"
]
