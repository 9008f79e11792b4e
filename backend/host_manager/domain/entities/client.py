"""Domain entity for hosting clients."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Client:
    """A hosting client.

    ``platform`` holds the id of the hosting Platform the client runs on,
    or an empty string when none is assigned. The reference is not enforced.
    """

    name: str
    ip_address: str = ""
    platform: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        name: str | None = None,
        ip_address: str | None = None,
        platform: str | None = None,
    ) -> None:
        """Update mutable fields in place."""
        if name is not None:
            self.name = name
        if ip_address is not None:
            self.ip_address = ip_address
        if platform is not None:
            self.platform = platform
