"""SQLAlchemy ORM model for the Platform entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from host_manager.infrastructure.database.base import Base


class PlatformModel(Base):
    """ORM model — maps to the 'platforms' table."""

    __tablename__ = "platforms"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<PlatformModel(id={self.id}, name='{self.name}')>"
