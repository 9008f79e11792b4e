"""Domain entity for hosting platforms (vendors clients are hosted on)."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Platform:
    """Catalog entry for a hosting platform."""

    name: str
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, name: str | None = None) -> None:
        if name is not None:
            self.name = name
