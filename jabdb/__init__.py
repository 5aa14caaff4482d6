"""
JabDB - an embedded JSON document store.

Tables of entries addressed by string ids, persisted through a pluggable
storage adapter.
"""
from .adapters import Adapter, AdapterFactory, JSONFileAdapter, MemoryAdapter
from .core.exceptions import (
    JabDBError,
    JabIOError,
    MalformedSourceFileError,
    TableNotFoundError,
    TableAlreadyExistsError,
    JabTableError,
    EntryNotFoundError,
)
from .core.logging_config import setup_logging
from .domain import Entry, Table, Database
from .services import JabDB, JabTable, LazyValue, LazyCollection, Resolution

__version__ = "0.1.0"

__all__ = [
    "JabDB",
    "JabTable",
    "LazyValue",
    "LazyCollection",
    "Resolution",
    "Adapter",
    "AdapterFactory",
    "JSONFileAdapter",
    "MemoryAdapter",
    "Entry",
    "Table",
    "Database",
    "JabDBError",
    "JabIOError",
    "MalformedSourceFileError",
    "TableNotFoundError",
    "TableAlreadyExistsError",
    "JabTableError",
    "EntryNotFoundError",
    "setup_logging",
]
