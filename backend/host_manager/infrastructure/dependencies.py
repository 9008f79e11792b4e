"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator, Awaitable, Callable
from functools import lru_cache
from typing import TypeVar

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from host_manager.config import get_settings
from host_manager.application.interfaces import (
    ClientRepository,
    PlatformRepository,
    RecordRepository,
)
from host_manager.application.services import (
    AuthService,
    ChangeNotifier,
    ClientService,
    DashboardService,
    PlatformService,
    RecordService,
)
from host_manager.domain.exceptions import AuthenticationError
from host_manager.infrastructure.database.session import async_session_factory, get_db_session
from host_manager.infrastructure.database.repositories import (
    SQLAlchemyAdminCredentialRepository,
    SQLAlchemyClientRepository,
    SQLAlchemyPlatformRepository,
    SQLAlchemyRecordRepository,
)
from host_manager.infrastructure.security import BcryptPasswordHasher, JwtTokenIssuer
from host_manager.infrastructure.storage.json_entity_store import (
    JsonClientRepository,
    JsonEntityStore,
    JsonPlatformRepository,
    JsonRecordRepository,
)

R = TypeVar("R")

_bearer = HTTPBearer(auto_error=False)


# ── Singletons ───────────────────────────────────────────────────────

@lru_cache
def get_change_notifier() -> ChangeNotifier:
    """Process-wide change notifier shared by all services and the event stream."""
    return ChangeNotifier()


@lru_cache
def get_json_store() -> JsonEntityStore:
    return JsonEntityStore(get_settings().json_store_path)


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher()


@lru_cache
def get_token_issuer() -> JwtTokenIssuer:
    settings = get_settings()
    return JwtTokenIssuer(
        secret_key=settings.secret_key,
        algorithm=settings.token_algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory for work that must not hold a request-scoped session."""
    return async_session_factory


# ── Repositories ─────────────────────────────────────────────────────

def repository_provider(
    backend: str,
    sql_repository: Callable[[AsyncSession], R],
    json_repository: Callable[[JsonEntityStore], R],
) -> Callable[..., Awaitable[R]]:
    """Build the FastAPI provider for one repository port.

    Only the database provider depends on ``get_db_session``, so JSON-backed
    requests never open a session.
    """
    if backend == "json":
        async def provide_json() -> R:
            return json_repository(get_json_store())
        return provide_json

    async def provide_sql(session: AsyncSession = Depends(get_db_session)) -> R:
        return sql_repository(session)
    return provide_sql


_backend = get_settings().storage_backend

get_client_repository = repository_provider(
    _backend, SQLAlchemyClientRepository, JsonClientRepository,
)
get_platform_repository = repository_provider(
    _backend, SQLAlchemyPlatformRepository, JsonPlatformRepository,
)
get_record_repository = repository_provider(
    _backend, SQLAlchemyRecordRepository, JsonRecordRepository,
)


# ── Services ─────────────────────────────────────────────────────────

async def get_client_service(
    repository: ClientRepository = Depends(get_client_repository),
) -> AsyncGenerator[ClientService, None]:
    """Provides a ClientService instance with its repository wired up."""
    yield ClientService(repository, get_change_notifier())


async def get_platform_service(
    repository: PlatformRepository = Depends(get_platform_repository),
) -> AsyncGenerator[PlatformService, None]:
    """Provides a PlatformService instance with its repository wired up."""
    yield PlatformService(repository, get_change_notifier())


async def get_record_service(
    repository: RecordRepository = Depends(get_record_repository),
) -> AsyncGenerator[RecordService, None]:
    """Provides a RecordService instance with its repository wired up."""
    yield RecordService(repository, get_change_notifier())


async def get_dashboard_service(
    records: RecordRepository = Depends(get_record_repository),
    clients: ClientRepository = Depends(get_client_repository),
    platforms: PlatformRepository = Depends(get_platform_repository),
) -> AsyncGenerator[DashboardService, None]:
    """Provides a DashboardService reading all three collections."""
    yield DashboardService(records=records, clients=clients, platforms=platforms)


def _auth_service(session: AsyncSession) -> AuthService:
    return AuthService(
        repository=SQLAlchemyAdminCredentialRepository(session),
        hasher=get_password_hasher(),
        tokens=get_token_issuer(),
    )


async def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AuthService, None]:
    """Provides an AuthService; credentials always live in the database."""
    yield _auth_service(session)


# ── Auth guards ──────────────────────────────────────────────────────

def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def require_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    auth: AuthService = Depends(get_auth_service),
) -> str:
    """Reject the request unless it carries a valid admin bearer token."""
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        return await auth.authenticate_token(credentials.credentials)
    except AuthenticationError as e:
        raise _unauthorized(e.message)


async def require_admin_stream(
    token: str | None = Query(None, description="Access token, for EventSource clients"),
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> str:
    """Admin check for long-lived streams.

    Accepts the token as a bearer header or a ``token`` query parameter
    (browsers' EventSource cannot set headers). The credential lookup uses
    its own session, closed before the stream starts.
    """
    raw_token = credentials.credentials if credentials is not None else token
    if not raw_token:
        raise _unauthorized("Not authenticated")
    async with session_factory() as session:
        try:
            return await _auth_service(session).authenticate_token(raw_token)
        except AuthenticationError as e:
            raise _unauthorized(e.message)
