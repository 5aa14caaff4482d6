import copy
import json

import pytest
import pytest_asyncio

from jabdb import JabDB, JSONFileAdapter, MemoryAdapter

PREFILLED = {
    "meta": {"version": 1},
    "tables": {
        "test_table": {
            "name": "test_table",
            "entries": {
                "1": {"id": "1", "value": {"number": 1, "string": "lorem"}},
                "2": {"id": "2", "value": {"number": 2, "string": "ipsum"}},
            },
        },
        "test_table2": {"name": "test_table2", "entries": {}},
    },
}


@pytest.fixture()
def prefilled_data():
    return copy.deepcopy(PREFILLED)


@pytest.fixture()
def prefilled_path(tmp_path):
    """A database file holding two tables."""
    path = tmp_path / "prefilled.json"
    path.write_text(json.dumps(PREFILLED), encoding="utf-8")
    return path


@pytest.fixture()
def writable_path(tmp_path):
    """Path of a database file that does not exist yet."""
    return tmp_path / "writable.json"


@pytest.fixture(params=["json", "memory"])
def adapter(request, tmp_path):
    """An unconnected adapter of each kind, starting from an empty database."""
    if request.param == "json":
        return JSONFileAdapter(tmp_path / "db.json")
    return MemoryAdapter()


@pytest_asyncio.fixture()
async def db(adapter):
    database = JabDB(adapter)
    await database.connect()
    return database


@pytest_asyncio.fixture()
async def table(db):
    return await db.create_table("people")
