"""
JabTable - entry operations on a single table.
"""
from typing import Any, List, Mapping, Optional

from .lazy import LazyCollection, LazyValue, Predicate
from ..adapters.base import Adapter
from ..core.exceptions import EntryNotFoundError
from ..core.logging_config import get_logger
from ..domain.entities import Entry, Table
from ..utils.ids import resolve_entry_id
from ..utils.merge import Customizer, merge_partials

logger = get_logger(__name__)


def _entry_key(entry_id: Any) -> str:
    """Entry ids are stored as strings; 1 and "1" address the same entry."""
    return str(entry_id)


class JabTable:
    """
    Handle on one table of a database.

    Holds only the table name and the owning adapter. Table contents are never
    cached: every operation fetches the current table from the adapter, and
    every mutation writes the whole table back.

    Read/modify/write cycles are not locked. Two overlapping mutations on the
    same table can each start from the same snapshot, and the later write wins.
    """

    def __init__(self, name: str, adapter: Adapter):
        """
        Initialize table handle.

        Args:
            name: Name of the table
            adapter: Adapter the table is persisted through (dependency injection)
        """
        self._name = name
        self._adapter = adapter

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"JabTable(name={self._name!r}, adapter={self._adapter!r})"

    async def _fetch(self) -> Table:
        return await self._adapter.get_table(self._name)

    async def _save(self, table: Table) -> None:
        await self._adapter.save_table(table)

    async def _values(self) -> List[Any]:
        table = await self._fetch()
        return [entry.value for entry in table.entries.values()]

    def _require_entry(self, table: Table, entry_id: str) -> Entry:
        entry = table.entries.get(entry_id)
        if entry is None:
            raise EntryNotFoundError(self._name, entry_id)
        return entry

    async def count(self) -> int:
        """Number of entries in the table."""
        table = await self._fetch()
        return len(table.entries)

    def get(self, entry_id: str, allow_missing: bool = False) -> LazyValue:
        """
        Lazily look up the value stored at ``entry_id``.

        Resolving the returned accessor fetches the table. A missing entry
        resolves to None when ``allow_missing`` is set, otherwise to
        EntryNotFoundError.
        """
        entry_id = _entry_key(entry_id)

        async def _lookup() -> Any:
            table = await self._fetch()
            entry = table.entries.get(entry_id)
            if entry is None:
                if allow_missing:
                    return None
                raise EntryNotFoundError(self._name, entry_id)
            return entry.value

        return LazyValue(_lookup)

    def find(self, predicate: Predicate) -> LazyCollection:
        """
        Lazily select values for which ``predicate(value)`` is truthy.

        ``await find(p).value()`` gives the first match in insertion order (or None),
        ``await find(p).values()`` gives every match.
        """
        return LazyCollection(self._values, predicate)

    async def create(self, value: Any, entry_id: Optional[str] = None) -> str:
        """
        Store a new entry and return its id.

        Without ``entry_id`` the next numeric id is generated. A supplied id is
        used as-is unless it is taken, in which case a numeric id is generated
        instead.
        """
        table = await self._fetch()

        requested = _entry_key(entry_id) if entry_id is not None else None
        new_id = resolve_entry_id(table.entries.keys(), requested)
        if requested is not None and new_id != requested:
            logger.debug(f"Entry id '{requested}' taken in table '{self._name}', using '{new_id}'")

        table.entries[new_id] = Entry(id=new_id, value=value)
        await self._save(table)

        logger.debug(f"Created entry '{new_id}' in table '{self._name}'")
        return new_id

    async def put(self, entry_id: str, value: Any) -> None:
        """Create or overwrite the entry at ``entry_id``."""
        entry_id = _entry_key(entry_id)
        table = await self._fetch()

        table.entries[entry_id] = Entry(id=entry_id, value=value)
        await self._save(table)

    async def patch(self, entry_id: str, *partials: Mapping) -> None:
        """
        Shallow-merge ``partials`` into the stored value, later partials winning.

        Raises:
            EntryNotFoundError: If the entry does not exist
        """
        await self.patch_with(entry_id, None, *partials)

    async def patch_with(
        self,
        entry_id: str,
        customizer: Optional[Customizer] = None,
        *partials: Mapping
    ) -> None:
        """
        Like patch(), resolving each incoming field with
        ``customizer(existing_field, incoming_field)``. A None result keeps the
        default behavior (incoming value overrides).

        Raises:
            EntryNotFoundError: If the entry does not exist
        """
        entry_id = _entry_key(entry_id)
        table = await self._fetch()
        entry = self._require_entry(table, entry_id)

        entry.value = merge_partials(entry.value, partials, customizer)
        await self._save(table)

        logger.debug(f"Patched entry '{entry_id}' in table '{self._name}'")

    async def delete(self, entry_id: str) -> None:
        """
        Remove an entry.

        Raises:
            EntryNotFoundError: If the entry does not exist
        """
        entry_id = _entry_key(entry_id)
        table = await self._fetch()
        self._require_entry(table, entry_id)

        del table.entries[entry_id]
        await self._save(table)

        logger.debug(f"Deleted entry '{entry_id}' from table '{self._name}'")
