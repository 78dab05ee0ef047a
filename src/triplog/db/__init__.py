"""
Database ORM models and the persistence gateway.

Importing this package registers all models on Base.metadata,
which TripStore.initialize() needs to create the tables.
"""

from triplog.db.schemas.base import Base
from triplog.db.schemas.profile import ProfileRecord
from triplog.db.schemas.trip import TripRecord
from triplog.db.store import TripStore

__all__ = ["Base", "ProfileRecord", "TripRecord", "TripStore"]
