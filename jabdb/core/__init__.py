"""
Core layer - configuration, logging and the error taxonomy.
"""
from .exceptions import (
    JabDBError,
    JabIOError,
    MalformedSourceFileError,
    TableNotFoundError,
    TableAlreadyExistsError,
    JabTableError,
    EntryNotFoundError,
)
from .logging_config import get_logger, setup_logging

__all__ = [
    "JabDBError",
    "JabIOError",
    "MalformedSourceFileError",
    "TableNotFoundError",
    "TableAlreadyExistsError",
    "JabTableError",
    "EntryNotFoundError",
    "get_logger",
    "setup_logging",
]
