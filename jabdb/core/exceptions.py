"""
Exception hierarchy for JabDB.
Every layer raises one of these so callers can discriminate failures by type.
"""
from typing import Optional


class JabDBError(Exception):
    """Base class for all JabDB errors."""
    pass


class JabIOError(JabDBError):
    """Raised when the underlying storage cannot be accessed."""
    pass


class MalformedSourceFileError(JabDBError):
    """Raised when persisted state fails structural validation."""
    pass


class TableNotFoundError(JabDBError):
    """Raised when a table does not exist."""

    def __init__(self, table_id: str, message: Optional[str] = None):
        self.table_id = table_id
        super().__init__(message or f"Table '{table_id}' not found")


class TableAlreadyExistsError(JabDBError):
    """Raised when creating a table whose name is taken."""

    def __init__(self, table_id: str, message: Optional[str] = None):
        self.table_id = table_id
        super().__init__(message or f"Table '{table_id}' already exists")


class JabTableError(JabDBError):
    """Base class for entry-level errors raised by a table."""
    pass


class EntryNotFoundError(JabTableError):
    """Raised when an entry does not exist in a table."""

    def __init__(self, table_id: str, entry_id: str, message: Optional[str] = None):
        self.table_id = table_id
        self.entry_id = entry_id
        super().__init__(message or f"Entry '{entry_id}' not found in table '{table_id}'")
