"""Unit tests for the JSON-file entity store."""

import json
import math

import pytest

from host_manager.application.services.demo_data import (
    demo_clients,
    demo_platforms,
    demo_records,
    seed_demo_data,
)
from host_manager.infrastructure.storage.json_entity_store import (
    JsonClientRepository,
    JsonEntityStore,
    JsonPlatformRepository,
    JsonRecordRepository,
)


@pytest.fixture
def store(tmp_path) -> JsonEntityStore:
    return JsonEntityStore(tmp_path / "data" / "store.json")


@pytest.mark.asyncio
async def test_missing_file_reads_as_empty(store):
    assert await JsonClientRepository(store).list_all() == []
    assert not store.path.exists()


@pytest.mark.asyncio
async def test_create_writes_wire_form(store):
    await JsonRecordRepository(store).create(demo_records()[0])

    data = json.loads(store.path.read_text("utf-8"))
    assert set(data) == {"clients", "platforms", "records"}
    row = data["records"][0]
    assert row["date"] == "2023-10-15"
    assert row["renewal_status"] == "Renewed"
    assert row["total_profit"] == 2800


@pytest.mark.asyncio
async def test_collections_are_independent(store):
    clients = JsonClientRepository(store)
    platforms = JsonPlatformRepository(store)
    for client in demo_clients():
        await clients.create(client)
    await platforms.create(demo_platforms()[0])

    assert [c.id for c in await clients.list_all()] == ["client1", "client2"]
    assert [p.name for p in await platforms.list_all()] == ["Hostcode"]


@pytest.mark.asyncio
async def test_update_and_delete(store):
    repository = JsonClientRepository(store)
    client = demo_clients()[0]
    await repository.create(client)

    client.update(name="Renamed")
    await repository.update(client)
    assert (await repository.get_by_id("client1")).name == "Renamed"

    assert await repository.delete("client1") is True
    assert await repository.delete("client1") is False
    assert await repository.get_by_id("client1") is None


@pytest.mark.asyncio
async def test_update_missing_entity_raises(store):
    with pytest.raises(ValueError):
        await JsonPlatformRepository(store).update(demo_platforms()[0])


@pytest.mark.asyncio
async def test_unreadable_rows_are_skipped(store):
    rows = [
        {"id": "ok", "client_id": "client1", "date": "2024-01-05", "renewal_status": "Renewed",
         "vendor_invoice_number": "A", "received_cost": "abc", "vendor_cost": 1,
         "total_profit": 0, "payment_status": "Paid", "created_at": "2024-01-05T00:00:00+00:00"},
        {"id": "bad", "client_id": "client1", "date": "2024-01-06", "renewal_status": "Expired",
         "vendor_invoice_number": "B", "received_cost": 1, "vendor_cost": 1,
         "total_profit": 0, "payment_status": "Paid", "created_at": "2024-01-06T00:00:00+00:00"},
    ]
    store.write("records", rows)

    records = await JsonRecordRepository(store).list_all()
    assert [r.id for r in records] == ["ok"]
    assert math.isnan(records[0].received_cost)


def test_corrupt_file_raises(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        store.read("clients")


@pytest.mark.asyncio
async def test_demo_seed_into_json_store(store):
    seeded = await seed_demo_data(
        JsonPlatformRepository(store),
        JsonClientRepository(store),
        JsonRecordRepository(store),
    )
    assert seeded is True
    records = await JsonRecordRepository(store).list_all()
    assert {r.id for r in records} == {"1", "2"}
