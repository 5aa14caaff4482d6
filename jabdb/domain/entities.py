"""
Domain entities - the value types stored by JabDB.
These carry no behavior beyond conversion to and from the persisted JSON shape.
"""
from dataclasses import dataclass, field
from typing import Any, Dict

from pydantic import ValidationError

from .schema import DatabaseDocument


@dataclass
class Entry:
    """
    A single identified record within a table.
    The value is opaque to the store: any JSON-serializable structure.
    """
    id: str
    value: Any

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        return cls(id=data["id"], value=data.get("value"))


@dataclass
class Table:
    """
    A named collection of entries keyed by entry id.
    Iteration order of ``entries`` is insertion order.
    """
    name: str
    entries: Dict[str, Entry] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "entries": {entry_id: entry.to_dict() for entry_id, entry in self.entries.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Table":
        entries = {
            entry_id: Entry.from_dict(entry)
            for entry_id, entry in data.get("entries", {}).items()
        }
        return cls(name=data["name"], entries=entries)


@dataclass
class Database:
    """
    The full persisted state: free-form metadata plus all tables by name.
    """
    meta: Dict[str, Any] = field(default_factory=dict)
    tables: Dict[str, Table] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "meta": dict(self.meta),
            "tables": {name: table.to_dict() for name, table in self.tables.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Database":
        """Build a Database from a raw document. Assumes is_database(data) holds."""
        tables = {name: Table.from_dict(table) for name, table in data["tables"].items()}
        return cls(meta=dict(data["meta"]), tables=tables)

    @staticmethod
    def is_database(data: Any) -> bool:
        """Check that a raw decoded document has the persisted database shape."""
        if not isinstance(data, dict):
            return False
        try:
            DatabaseDocument.model_validate(data)
        except ValidationError:
            return False
        return True
