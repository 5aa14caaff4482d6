"""
Service layer - database and table operations.
"""
from .jab_db import JabDB
from .jab_table import JabTable
from .lazy import LazyValue, LazyCollection, Resolution

__all__ = [
    "JabDB",
    "JabTable",
    "LazyValue",
    "LazyCollection",
    "Resolution"
]
