"""
JabDB - table lifecycle on top of a storage adapter.
"""
from typing import Optional

from .jab_table import JabTable
from ..adapters.base import Adapter
from ..adapters.factory import AdapterFactory
from ..core.exceptions import TableAlreadyExistsError
from ..core.logging_config import get_logger
from ..domain.entities import Table

logger = get_logger(__name__)


class JabDB:
    """
    Entry point of the library: owns one adapter and hands out table handles.

    Example:
        db = JabDB(JSONFileAdapter("data/db.json"))
        await db.connect()
        users = await db.create_table("users")
        user_id = await users.create({"name": "John", "age": 30})
    """

    def __init__(self, adapter: Optional[Adapter] = None):
        """
        Initialize database.

        Args:
            adapter: Storage adapter (defaults to AdapterFactory.create(), configured from the environment)
        """
        self.adapter = adapter if adapter is not None else AdapterFactory.create()

    def __repr__(self) -> str:
        return f"JabDB(adapter={self.adapter!r})"

    async def connect(self) -> None:
        """Connect the underlying adapter."""
        await self.adapter.connect()

    async def close(self) -> None:
        """Close the underlying adapter."""
        await self.adapter.close()

    async def get_table(self, name: str) -> JabTable:
        """
        Get a handle on an existing table.

        Raises:
            TableNotFoundError: If no table with that name exists
        """
        await self.adapter.get_table(name)
        return JabTable(name, self.adapter)

    async def create_table(self, name: str, return_existing_if_present: bool = True) -> JabTable:
        """
        Create an empty table and return a handle on it.

        Args:
            name: Table name
            return_existing_if_present: Return the existing table instead of failing

        Raises:
            TableAlreadyExistsError: If the table exists and return_existing_if_present is False
        """
        if await self.adapter.has_table(name):
            if not return_existing_if_present:
                raise TableAlreadyExistsError(name)
            return JabTable(name, self.adapter)

        await self.adapter.save_table(Table(name=name))
        logger.info(f"Created table '{name}'")
        return JabTable(name, self.adapter)

    async def delete_table(self, name: str) -> None:
        """
        Delete a table and all its entries.

        Raises:
            TableNotFoundError: If no table with that name exists
        """
        await self.adapter.delete_table(name)
        logger.info(f"Deleted table '{name}'")
