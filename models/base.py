import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base whose rows can be bound to field descriptors."""

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc)
    )

    def get_attribute(self, key: str) -> Any:
        """Read a mapped column, relationship or plain attribute; dotted keys walk relationships."""
        value: Any = self
        for part in key.split("."):
            if value is None:
                return None
            value = getattr(value, part, None)
        return value
