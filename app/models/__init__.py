"""SQLAlchemy ORM models.

Models represent database tables:
- users: registered accounts
- platforms: affiliate platform catalog
- affiliate_links: tracking links per platform (reserved)
- performance_metrics: click/conversion counters per link (reserved)
"""

from app.models.user import User
from app.models.platform import Platform
from app.models.affiliate_link import AffiliateLink
from app.models.performance_metric import PerformanceMetric

__all__ = ["User", "Platform", "AffiliateLink", "PerformanceMetric"]
