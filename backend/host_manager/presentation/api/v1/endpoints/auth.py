"""Admin login and credential management endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from host_manager.application.schemas import CredentialsUpdate, LoginRequest, TokenResponse
from host_manager.application.services import AuthService
from host_manager.domain.exceptions import AuthenticationError
from host_manager.infrastructure.dependencies import get_auth_service, require_admin

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Exchange admin credentials for a bearer token."""
    try:
        token = await service.login(data.username, data.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    return TokenResponse(access_token=token)


@router.put("/credentials", dependencies=[Depends(require_admin)])
async def change_credentials(
    data: CredentialsUpdate,
    service: AuthService = Depends(get_auth_service),
) -> dict:
    """Change the admin username and password. Existing tokens stop working."""
    try:
        credential = await service.change_credentials(data)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    return {"username": credential.username}
