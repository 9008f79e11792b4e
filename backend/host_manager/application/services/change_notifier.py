"""Change notifier — in-process SSE broadcaster for entity writes."""

import asyncio
import json
import logging
from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


class ChangeNotifier:
    """Tells connected clients that a collection changed so they can re-fetch it.

    Each subscriber gets its own bounded asyncio.Queue. Broadcasting pushes
    the event to all queues; a subscriber whose queue is full is dropped.
    """

    def __init__(self, max_pending: int = 100) -> None:
        self._max_pending = max_pending
        self._queues: list[asyncio.Queue[str | None]] = []

    async def subscribe(self) -> AsyncGenerator[str, None]:
        """Subscribe to change events. Yields formatted SSE strings.

        The generator automatically unsubscribes when the client disconnects.
        """
        queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=self._max_pending)
        self._queues.append(queue)
        try:
            while True:
                event = await queue.get()
                if event is None:
                    break
                yield event
        finally:
            if queue in self._queues:
                self._queues.remove(queue)

    async def broadcast(self, collection: str, action: str, entity_id: str) -> None:
        """Broadcast a ``change`` event for one entity write."""
        payload = {"collection": collection, "action": action, "id": entity_id}
        sse_message = f"event: change\ndata: {json.dumps(payload)}\n\n"
        dead_queues: list[asyncio.Queue[str | None]] = []

        for queue in self._queues:
            try:
                queue.put_nowait(sse_message)
            except asyncio.QueueFull:
                dead_queues.append(queue)
                logger.warning("Change subscriber queue full — disconnecting")

        for q in dead_queues:
            self._queues.remove(q)
            # Make room for the sentinel so the subscriber loop can exit.
            while not q.empty():
                q.get_nowait()
            q.put_nowait(None)

    async def shutdown(self) -> None:
        """Disconnect all subscribers."""
        for queue in self._queues:
            while not queue.empty():
                queue.get_nowait()
            queue.put_nowait(None)
        self._queues.clear()

    @property
    def subscriber_count(self) -> int:
        return len(self._queues)
