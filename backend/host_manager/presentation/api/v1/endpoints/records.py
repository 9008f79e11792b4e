"""Record CRUD and CSV export endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from host_manager.application.schemas import RecordCreate, RecordResponse, RecordUpdate
from host_manager.application.services import DashboardService, RecordService
from host_manager.domain.exceptions import EntityNotFoundError
from host_manager.infrastructure.dependencies import get_dashboard_service, get_record_service

router = APIRouter(prefix="/records", tags=["Records"])


@router.get("", response_model=list[RecordResponse])
async def list_records(
    month: int | None = Query(None, ge=1, le=12, description="Filter month (1-12)"),
    year: int | None = Query(None, ge=1, le=9999, description="Filter year"),
    service: RecordService = Depends(get_record_service),
) -> list[RecordResponse]:
    """Retrieve records, newest first. Filtered only when both month and year are given."""
    records = await service.list_records(month=month, year=year)
    return [RecordResponse.model_validate(r, from_attributes=True) for r in records]


@router.get("/export")
async def export_records(
    month: int | None = Query(None, ge=1, le=12),
    year: int | None = Query(None, ge=1, le=9999),
    service: DashboardService = Depends(get_dashboard_service),
) -> Response:
    """Download records as a CSV attachment."""
    export = await service.export_csv(month=month, year=year)
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@router.get("/{record_id}", response_model=RecordResponse)
async def get_record(
    record_id: str,
    service: RecordService = Depends(get_record_service),
) -> RecordResponse:
    try:
        record = await service.get_record(record_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return RecordResponse.model_validate(record, from_attributes=True)


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
async def create_record(
    data: RecordCreate,
    service: RecordService = Depends(get_record_service),
) -> RecordResponse:
    """Create a new record. Profit is computed from the two costs."""
    record = await service.create_record(data)
    return RecordResponse.model_validate(record, from_attributes=True)


@router.put("/{record_id}", response_model=RecordResponse)
async def update_record(
    record_id: str,
    data: RecordUpdate,
    service: RecordService = Depends(get_record_service),
) -> RecordResponse:
    try:
        record = await service.update_record(record_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return RecordResponse.model_validate(record, from_attributes=True)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record(
    record_id: str,
    service: RecordService = Depends(get_record_service),
) -> None:
    try:
        await service.delete_record(record_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
