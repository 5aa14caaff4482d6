"""
In-memory adapter implementing the Adapter contract.
Perfect for tests and demos - the database is a plain dict held by the adapter.
Data is lost when the adapter is discarded.
"""
import copy
from typing import Any, Dict, Optional

from .base import Adapter
from ..core.exceptions import JabIOError, MalformedSourceFileError, TableNotFoundError
from ..core.logging_config import get_logger
from ..domain.entities import Database, Table

logger = get_logger(__name__)


class MemoryAdapter(Adapter):
    """
    In-memory adapter.
    Keeps the database in its persisted JSON shape and stores deep copies,
    so callers get the same snapshot semantics as with the file adapter.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        """
        Initialize in-memory adapter.

        Args:
            initial: Optional raw database document to start from; validated on connect
        """
        self._initial = copy.deepcopy(initial) if initial is not None else None
        self._data: Optional[Dict[str, Any]] = None

    async def connect(self) -> None:
        """Materialize the database (no-op if already connected)."""
        if self._data is not None:
            return

        if self._initial is None:
            self._data = Database().to_dict()
            logger.info("Initialized new in-memory database")
            return

        if not Database.is_database(self._initial):
            raise MalformedSourceFileError("Invalid initial data, missing 'tables' or 'meta' field or mismatched keys")

        self._data = copy.deepcopy(self._initial)
        logger.info(f"Connected in-memory database with {len(self._data['tables'])} table(s)")

    def _tables(self) -> Dict[str, Any]:
        if self._data is None:
            raise JabIOError("In-memory database is not connected")
        return self._data["tables"]

    async def get_table(self, table_id: str) -> Table:
        raw = self._tables().get(table_id)
        if raw is None:
            raise TableNotFoundError(table_id)
        return Table.from_dict(copy.deepcopy(raw))

    async def save_table(self, table: Table) -> None:
        self._tables()[table.name] = copy.deepcopy(table.to_dict())

    async def delete_table(self, table_id: str) -> None:
        tables = self._tables()
        if table_id not in tables:
            raise TableNotFoundError(table_id)
        del tables[table_id]

    async def close(self) -> None:
        """Close adapter (no-op for in-memory, data stays until the adapter is dropped)."""
        pass

    def dump(self) -> Dict[str, Any]:
        """Return a copy of the raw database document (useful for debugging)."""
        if self._data is None:
            raise JabIOError("In-memory database is not connected")
        return copy.deepcopy(self._data)
