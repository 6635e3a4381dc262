"""Data stores for persistence.

Stores handle:
- PostgreSQL: DB session, repositories, ORM operations

No business/ranking logic in stores - that belongs in services.
"""
