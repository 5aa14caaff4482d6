"""
JSON file-based adapter implementing the Adapter contract.
The whole database lives in a single JSON document which is read in full
before every operation and rewritten in full after every mutation.
"""
import asyncio
import json
import os
import tempfile
from threading import Lock
from pathlib import Path
from typing import Optional, Union

from .base import Adapter
from ..core.exceptions import JabIOError, MalformedSourceFileError, TableNotFoundError
from ..core.logging_config import get_logger
from ..domain.entities import Database, Table

logger = get_logger(__name__)

JSON_EXTENSION = ".json"


class JSONFileAdapter(Adapter):
    """
    Single-file JSON adapter.

    Blocking file I/O runs in the default executor. Each write goes to its own
    temporary file in the source directory which then replaces the source, so
    a failed write leaves the previous document untouched and readers never
    see a partial document. Physical writes are serialized per adapter; the
    read/modify/write cycle around them is not.
    """

    def __init__(
        self,
        source: Union[str, Path],
        require_json_file: bool = True,
        indent: Optional[int] = None
    ):
        """
        Initialize JSON file adapter.

        Args:
            source: Path of the database file
            require_json_file: Reject sources that do not end in '.json'
            indent: Indentation used when writing (None writes compact JSON)
        """
        self.source = Path(source)
        self.require_json_file = require_json_file
        self.indent = indent

        # Lock for thread-safe file writes
        self._lock = Lock()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(source={str(self.source)!r})"

    async def connect(self) -> None:
        """Validate an existing source file, or create an empty database."""
        self._check_extension()

        if self.source.exists():
            await self._read_source()
            logger.info(f"Connected to existing database at {self.source}")
        else:
            await self._write_source(Database())
            logger.info(f"Initialized new database at {self.source}")

    def _check_extension(self):
        if self.require_json_file and self.source.suffix.lower() != JSON_EXTENSION:
            raise MalformedSourceFileError(f"Source file '{self.source}' is not a '.json' file!")

    def _check_source(self):
        """Check that the source file exists, is a regular file and has the right extension."""
        self._check_extension()

        if not self.source.exists():
            raise JabIOError(f"Source '{self.source}' does not exist!")
        if not self.source.is_file():
            raise JabIOError(f"Source '{self.source}' is not a file!")

    async def _read_source(self) -> Database:
        """Read the source file and return it as a Database."""
        def _read() -> Database:
            self._check_source()

            try:
                raw = self.source.read_text(encoding="utf-8")
            except UnicodeDecodeError as e:
                raise MalformedSourceFileError(f"Source '{self.source}' is not valid UTF-8") from e
            except OSError as e:
                logger.error(f"Error reading {self.source}: {e}")
                raise JabIOError(f"Could not read source '{self.source}': {e}") from e

            try:
                data = json.loads(raw)
            except json.JSONDecodeError as e:
                raise MalformedSourceFileError(f"Source '{self.source}' is not valid JSON: {e}") from e

            if not Database.is_database(data):
                raise MalformedSourceFileError("Invalid source file, missing 'tables' or 'meta' field or mismatched keys")

            return Database.from_dict(data)

        loop = asyncio.get_event_loop()
        database = await loop.run_in_executor(None, _read)
        logger.debug(f"Read {len(database.tables)} table(s) from {self.source}")
        return database

    async def _write_source(self, database: Database) -> None:
        """Serialize the whole database and atomically replace the source file."""
        # Serialize first so unserializable values fail before anything touches disk
        try:
            payload = json.dumps(database.to_dict(), indent=self.indent, ensure_ascii=False)
        except ValueError as e:
            # json reports circular references as ValueError
            raise TypeError(f"Database is not JSON serializable: {e}") from e

        def _write():
            temp_file = None
            with self._lock:
                try:
                    self.source.parent.mkdir(parents=True, exist_ok=True)
                    fd, temp_name = tempfile.mkstemp(
                        dir=self.source.parent, prefix=f"{self.source.name}.", suffix=".tmp"
                    )
                    temp_file = Path(temp_name)
                    with os.fdopen(fd, "w", encoding="utf-8") as f:
                        f.write(payload)
                    temp_file.replace(self.source)
                except OSError as e:
                    logger.error(f"Error writing {self.source}: {e}")
                    if temp_file is not None:
                        temp_file.unlink(missing_ok=True)
                    raise JabIOError(f"Could not write source '{self.source}': {e}") from e

        loop = asyncio.get_event_loop()
        await loop.run_in_executor(None, _write)
        logger.debug(f"Wrote {len(database.tables)} table(s) to {self.source}")

    async def get_table(self, table_id: str) -> Table:
        database = await self._read_source()

        table = database.tables.get(table_id)
        if table is None:
            raise TableNotFoundError(table_id)
        return table

    async def save_table(self, table: Table) -> None:
        database = await self._read_source()

        database.tables[table.name] = table
        await self._write_source(database)

    async def delete_table(self, table_id: str) -> None:
        database = await self._read_source()

        if table_id not in database.tables:
            raise TableNotFoundError(table_id)

        del database.tables[table_id]
        await self._write_source(database)
