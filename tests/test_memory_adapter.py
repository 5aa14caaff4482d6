"""
Tests for the in-memory adapter.
"""
import pytest

from jabdb import Entry, JabIOError, MalformedSourceFileError, MemoryAdapter, Table, TableNotFoundError


@pytest.mark.asyncio
async def test_connect_creates_empty_database():
    adapter = MemoryAdapter()

    await adapter.connect()

    assert adapter.dump() == {"meta": {}, "tables": {}}


@pytest.mark.asyncio
async def test_connect_with_initial_data(prefilled_data):
    adapter = MemoryAdapter(initial=prefilled_data)
    await adapter.connect()

    table = await adapter.get_table("test_table")

    assert table.entries["2"].value == {"number": 2, "string": "ipsum"}


@pytest.mark.asyncio
async def test_connect_is_idempotent():
    adapter = MemoryAdapter()
    await adapter.connect()
    await adapter.save_table(Table("t"))

    await adapter.connect()

    assert await adapter.has_table("t")


@pytest.mark.asyncio
async def test_connect_rejects_malformed_initial_data():
    with pytest.raises(MalformedSourceFileError):
        await MemoryAdapter(initial={"tables": {}}).connect()


@pytest.mark.asyncio
async def test_requires_connect():
    adapter = MemoryAdapter()

    with pytest.raises(JabIOError):
        await adapter.get_table("t")
    with pytest.raises(JabIOError):
        await adapter.save_table(Table("t"))


@pytest.mark.asyncio
async def test_tables_are_copies():
    adapter = MemoryAdapter()
    await adapter.connect()

    table = Table("t", {"1": Entry("1", {"n": 1})})
    await adapter.save_table(table)
    table.entries["1"].value["n"] = 99

    fetched = await adapter.get_table("t")
    assert fetched.entries["1"].value == {"n": 1}

    fetched.entries.clear()
    assert len((await adapter.get_table("t")).entries) == 1


@pytest.mark.asyncio
async def test_initial_data_is_not_mutated():
    initial = {"meta": {}, "tables": {}}
    adapter = MemoryAdapter(initial=initial)
    await adapter.connect()

    await adapter.save_table(Table("t"))

    assert initial == {"meta": {}, "tables": {}}


@pytest.mark.asyncio
async def test_delete_table_not_found():
    adapter = MemoryAdapter()
    await adapter.connect()

    with pytest.raises(TableNotFoundError):
        await adapter.delete_table("missing")
