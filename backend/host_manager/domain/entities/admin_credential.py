"""Domain entity for the admin login. Only a password hash is ever held."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class AdminCredential:
    username: str
    password_hash: str
    id: str = field(default_factory=lambda: str(uuid4()))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, username: str, password_hash: str) -> None:
        self.username = username
        self.password_hash = password_hash
        self.updated_at = datetime.now(timezone.utc)
