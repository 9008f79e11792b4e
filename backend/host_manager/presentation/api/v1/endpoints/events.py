"""Server-Sent Events stream of entity changes."""

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from host_manager.application.services import ChangeNotifier
from host_manager.infrastructure.dependencies import get_change_notifier

router = APIRouter(tags=["Events"])


@router.get("/events")
async def change_stream(
    notifier: ChangeNotifier = Depends(get_change_notifier),
) -> StreamingResponse:
    """SSE endpoint for entity change notifications.

    Clients connect via EventSource and receive ``change`` events of the form
    ``{"collection": "records", "action": "updated", "id": "..."}`` and
    re-fetch the affected collection.
    """
    return StreamingResponse(
        notifier.subscribe(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
