"""Platform model.

An affiliate platform in the catalog: commission terms, niches it serves,
and the steps to join. Niches and join steps live on the row itself
(PostgreSQL arrays), so a platform is read back as one record.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from app.stores.postgres import Base, new_id


class Platform(Base):
    """Affiliate platform record."""

    __tablename__ = "platforms"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)

    name: Mapped[str] = mapped_column(String(200), index=True)
    description: Mapped[str] = mapped_column(Text, default="")

    # Free-text category tags, matched by substring search
    niches: Mapped[list[str]] = mapped_column(ARRAY(String(200)), default=list)

    # Kept as submitted (e.g. "8%", "30", "up to 50%")
    commission_rate: Mapped[str] = mapped_column(String(100), default="")
    api_url: Mapped[str] = mapped_column(String(500), default="")

    # Ordered enrollment instructions
    join_steps: Mapped[list[str]] = mapped_column(ARRAY(Text), default=list)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Platform {self.name} ({self.commission_rate})>"
