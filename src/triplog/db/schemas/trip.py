"""SQLAlchemy ORM model for the trips table.

Column names keep the camelCase layout of existing trip log databases.
"""

from sqlalchemy import Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from triplog.db.schemas.base import Base


class TripRecord(Base):
    __tablename__ = "trips"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    trip_date: Mapped[str] = mapped_column("tripDate", Text, nullable=False)
    start_destination: Mapped[str] = mapped_column("startDestination", Text, nullable=False)
    end_destination: Mapped[str] = mapped_column("endDestination", Text, nullable=False)
    start_postal: Mapped[str | None] = mapped_column("startPostal", Text)
    end_postal: Mapped[str | None] = mapped_column("endPostal", Text)
    distance: Mapped[float] = mapped_column(Float, nullable=False)
    time: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[str | None] = mapped_column(Text)
    # Added after the first release; see services.migration
    start_travel_time: Mapped[str | None] = mapped_column("startTravelTime", Text)
    end_travel_time: Mapped[str | None] = mapped_column("endTravelTime", Text)

    __table_args__ = {"sqlite_autoincrement": True}
