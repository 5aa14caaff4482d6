"""
Domain layer - the Entry, Table and Database value types.
"""
from .entities import Entry, Table, Database
from .schema import DatabaseDocument, TableDocument, EntryDocument

__all__ = [
    "Entry",
    "Table",
    "Database",
    "DatabaseDocument",
    "TableDocument",
    "EntryDocument",
]
