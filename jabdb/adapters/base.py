"""
Abstract base class for storage adapters.
All storage implementations must inherit from this class.
"""
from abc import ABC, abstractmethod

from ..core.exceptions import TableNotFoundError
from ..core.logging_config import get_logger
from ..domain.entities import Table

logger = get_logger(__name__)


class Adapter(ABC):
    """
    Abstract storage contract used by JabDB and JabTable.

    Implementations own the whole Database. Every operation re-reads the full
    persisted state before acting and rewrites it in full after a mutation.
    Tables handed out or accepted are copies, never shared with adapter state.

    There is no locking around the read/modify/write cycle: overlapping
    mutations from concurrent callers may overwrite each other.
    """

    @abstractmethod
    async def connect(self) -> None:
        """
        Initialize the storage. Idempotent.

        Creates an empty database (no meta, no tables) if none is persisted,
        otherwise validates the persisted one.

        Raises:
            MalformedSourceFileError: persisted state has the wrong shape
            JabIOError: storage could not be accessed
        """
        pass

    @abstractmethod
    async def get_table(self, table_id: str) -> Table:
        """
        Get a table by name.

        Raises:
            TableNotFoundError: no table with that name exists
        """
        pass

    @abstractmethod
    async def save_table(self, table: Table) -> None:
        """Insert a table, or fully overwrite the table of the same name."""
        pass

    @abstractmethod
    async def delete_table(self, table_id: str) -> None:
        """
        Delete a table by name.

        Raises:
            TableNotFoundError: no table with that name exists
        """
        pass

    async def has_table(self, table_id: str) -> bool:
        """Check whether a table exists."""
        try:
            await self.get_table(table_id)
        except TableNotFoundError:
            return False
        return True

    async def close(self) -> None:
        """Release any resources held by the adapter."""
        pass
