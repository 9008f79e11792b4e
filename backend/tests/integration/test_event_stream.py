"""Tests for the /events change stream: auth, delivery and connection usage.

The stream never ends on its own, so it is driven at the ASGI level; the
client disconnect is simulated through ``receive``.
"""

import asyncio
import json

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from host_manager.application.services import AuthService
from host_manager.application.services.demo_data import demo_clients, demo_records
from host_manager.domain.entities import AdminCredential
from host_manager.infrastructure.database import create_tables
from host_manager.infrastructure.database.repositories import SQLAlchemyAdminCredentialRepository
from host_manager.infrastructure.dependencies import (
    get_auth_service,
    get_change_notifier,
    get_client_repository,
    get_platform_repository,
    get_record_repository,
    get_session_factory,
    get_token_issuer,
)
from host_manager.infrastructure.security import BcryptPasswordHasher
from host_manager.main import create_app
from tests.fakes import (
    FakeAdminCredentialRepository,
    FakeClientRepository,
    FakePlatformRepository,
    FakeRecordRepository,
)


class AsgiStream:
    """One open GET request against an ASGI app, read message by message."""

    def __init__(self, app, path: str, query: str = "", headers: dict[str, str] | None = None):
        self.messages: asyncio.Queue[dict] = asyncio.Queue()
        self._disconnected = asyncio.Event()
        raw_headers = [(b"host", b"test")]
        raw_headers += [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
        scope = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": "GET",
            "scheme": "http",
            "path": path,
            "raw_path": path.encode(),
            "root_path": "",
            "query_string": query.encode(),
            "headers": raw_headers,
            "client": ("testclient", 50000),
            "server": ("test", 80),
        }
        self._task = asyncio.ensure_future(app(scope, self._receive, self._send))

    async def _receive(self) -> dict:
        await self._disconnected.wait()
        return {"type": "http.disconnect"}

    async def _send(self, message: dict) -> None:
        await self.messages.put(message)

    async def next_message(self) -> dict:
        return await asyncio.wait_for(self.messages.get(), timeout=2)

    async def close(self) -> None:
        self._disconnected.set()
        await asyncio.wait_for(self._task, timeout=2)


async def _until(condition) -> None:
    for _ in range(200):
        if condition():
            return
        await asyncio.sleep(0.01)
    raise AssertionError("condition not reached")


@pytest_asyncio.fixture
async def database(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'events.db'}")
    await create_tables(engine)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        await SQLAlchemyAdminCredentialRepository(session).save(
            AdminCredential(username="admin", password_hash="unused")
        )
        await session.commit()
    yield engine, factory
    await engine.dispose()


@pytest.fixture
def app(database):
    _, factory = database
    credentials = FakeAdminCredentialRepository()
    credentials.credential = AdminCredential(username="admin", password_hash="unused")
    records = FakeRecordRepository(demo_records())

    application = create_app()
    application.dependency_overrides[get_session_factory] = lambda: factory
    application.dependency_overrides[get_client_repository] = lambda: FakeClientRepository(demo_clients())
    application.dependency_overrides[get_platform_repository] = lambda: FakePlatformRepository()
    application.dependency_overrides[get_record_repository] = lambda: records
    application.dependency_overrides[get_auth_service] = lambda: AuthService(
        credentials, BcryptPasswordHasher(rounds=4), get_token_issuer(),
    )
    return application


@pytest.fixture
def token() -> str:
    return get_token_issuer().issue("admin")


@pytest.mark.asyncio
async def test_open_streams_hold_no_database_connection(app, database, token):
    engine, _ = database
    notifier = get_change_notifier()
    before = notifier.subscriber_count

    streams = [
        AsgiStream(app, "/api/v1/events", query=f"token={token}"),
        AsgiStream(app, "/api/v1/events", query=f"token={token}"),
        AsgiStream(app, "/api/v1/events", headers={"Authorization": f"Bearer {token}"}),
    ]
    try:
        for stream in streams:
            start = await stream.next_message()
            assert start["type"] == "http.response.start"
            assert start["status"] == 200
        await _until(lambda: notifier.subscriber_count == before + 3)

        assert engine.pool.checkedout() == 0
    finally:
        for stream in streams:
            await stream.close()

    await _until(lambda: notifier.subscriber_count == before)


@pytest.mark.asyncio
async def test_record_write_is_pushed_to_stream(app, token):
    notifier = get_change_notifier()
    before = notifier.subscriber_count

    stream = AsgiStream(app, "/api/v1/events", query=f"token={token}")
    try:
        assert (await stream.next_message())["status"] == 200
        await _until(lambda: notifier.subscriber_count == before + 1)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
            response = await http.post(
                "/api/v1/records",
                headers={"Authorization": f"Bearer {token}"},
                json={
                    "client_id": "client1",
                    "date": "2024-03-01",
                    "vendor_invoice_number": "INV-2024-003",
                    "received_cost": 5000,
                    "vendor_cost": 3200,
                },
            )
        assert response.status_code == 201

        message = await stream.next_message()
        frame = message["body"].decode()
        assert frame.startswith("event: change\ndata: ")
        assert frame.endswith("\n\n")
        payload = json.loads(frame.split("data: ", 1)[1])
        assert payload == {"collection": "records", "action": "created", "id": response.json()["id"]}
    finally:
        await stream.close()


@pytest.mark.asyncio
async def test_stream_rejects_unknown_token(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        response = await http.get("/api/v1/events", params={"token": "not-a-token"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_stream_rejects_token_for_renamed_admin(app):
    stale = get_token_issuer().issue("former-admin")
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        response = await http.get("/api/v1/events", params={"token": stale})
    assert response.status_code == 401
