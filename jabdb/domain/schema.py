"""
Pydantic models describing the persisted database document.
Used only to validate raw decoded data before it becomes domain entities.
"""
from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator


class EntryDocument(BaseModel):
    """Persisted shape of a single entry."""
    id: str
    value: Any


class TableDocument(BaseModel):
    """Persisted shape of a table. Entry keys must equal entry ids."""
    name: str
    entries: Dict[str, EntryDocument] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_entry_keys(self) -> "TableDocument":
        for key, entry in self.entries.items():
            if key != entry.id:
                raise ValueError(f"Entry stored under '{key}' has id '{entry.id}'")
        return self


class DatabaseDocument(BaseModel):
    """Persisted shape of the whole database. Table keys must equal table names."""
    meta: Dict[str, Any]
    tables: Dict[str, TableDocument]

    @model_validator(mode="after")
    def check_table_keys(self) -> "DatabaseDocument":
        for key, table in self.tables.items():
            if key != table.name:
                raise ValueError(f"Table stored under '{key}' is named '{table.name}'")
        return self
