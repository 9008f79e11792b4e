"""Platform CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from host_manager.application.schemas import PlatformCreate, PlatformResponse, PlatformUpdate
from host_manager.application.services import PlatformService
from host_manager.domain.exceptions import EntityNotFoundError
from host_manager.infrastructure.dependencies import get_platform_service

router = APIRouter(prefix="/platforms", tags=["Platforms"])


@router.get("", response_model=list[PlatformResponse])
async def list_platforms(
    service: PlatformService = Depends(get_platform_service),
) -> list[PlatformResponse]:
    platforms = await service.list_platforms()
    return [PlatformResponse.model_validate(p, from_attributes=True) for p in platforms]


@router.get("/{platform_id}", response_model=PlatformResponse)
async def get_platform(
    platform_id: str,
    service: PlatformService = Depends(get_platform_service),
) -> PlatformResponse:
    try:
        platform = await service.get_platform(platform_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return PlatformResponse.model_validate(platform, from_attributes=True)


@router.post("", response_model=PlatformResponse, status_code=status.HTTP_201_CREATED)
async def create_platform(
    data: PlatformCreate,
    service: PlatformService = Depends(get_platform_service),
) -> PlatformResponse:
    platform = await service.create_platform(data)
    return PlatformResponse.model_validate(platform, from_attributes=True)


@router.put("/{platform_id}", response_model=PlatformResponse)
async def update_platform(
    platform_id: str,
    data: PlatformUpdate,
    service: PlatformService = Depends(get_platform_service),
) -> PlatformResponse:
    try:
        platform = await service.update_platform(platform_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return PlatformResponse.model_validate(platform, from_attributes=True)


@router.delete("/{platform_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_platform(
    platform_id: str,
    service: PlatformService = Depends(get_platform_service),
) -> None:
    """Delete a platform. Clients pointing at it show "Unknown Platform"."""
    try:
        await service.delete_platform(platform_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
