"""Affiliate link model.

Tracking link for a platform. Reserved: no route reads or writes links yet.
`platform_id` is a plain id reference, not a foreign key.
"""

from datetime import datetime
import re

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column, validates

from app.stores.postgres import Base, new_id

# Scheme-qualified URL with a host part
URL_PATTERN = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)


class AffiliateLink(Base):
    __tablename__ = "affiliate_links"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    url: Mapped[str] = mapped_column(String(2048))
    platform_id: Mapped[str] = mapped_column(String(32), index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )

    @validates("url")
    def _validate_url(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not URL_PATTERN.match(value.strip()):
            raise ValueError(f"Invalid affiliate link URL: {value!r}")
        return value.strip()

    def __repr__(self) -> str:
        return f"<AffiliateLink {self.url}>"
