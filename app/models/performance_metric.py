"""Performance metric model.

Click/conversion counters for an affiliate link. Reserved, like AffiliateLink.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.stores.postgres import Base, new_id


class PerformanceMetric(Base):
    __tablename__ = "performance_metrics"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    affiliate_link_id: Mapped[str] = mapped_column(String(32), index=True)

    clicks: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    conversions: Mapped[int] = mapped_column(Integer, default=0, server_default="0")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )

    @property
    def conversion_rate(self) -> float:
        """Conversions per click (0.0 when there are no clicks)."""
        if not self.clicks:
            return 0.0
        return (self.conversions or 0) / self.clicks
