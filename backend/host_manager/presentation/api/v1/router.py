"""Versioned API router. Health and login are public; everything else needs an admin token."""

from fastapi import APIRouter, Depends

from host_manager.infrastructure.dependencies import require_admin, require_admin_stream
from host_manager.presentation.api.v1.endpoints.health import router as health_router
from host_manager.presentation.api.v1.endpoints.auth import router as auth_router
from host_manager.presentation.api.v1.endpoints.clients import router as clients_router
from host_manager.presentation.api.v1.endpoints.platforms import router as platforms_router
from host_manager.presentation.api.v1.endpoints.records import router as records_router
from host_manager.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from host_manager.presentation.api.v1.endpoints.events import router as events_router

_protected = [Depends(require_admin)]

router = APIRouter(prefix="/api/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(clients_router, dependencies=_protected)
router.include_router(platforms_router, dependencies=_protected)
router.include_router(records_router, dependencies=_protected)
router.include_router(dashboard_router, dependencies=_protected)
# Streams check the token once, without holding a request-scoped DB session
router.include_router(events_router, dependencies=[Depends(require_admin_stream)])
