"""SQLite trip store — connection management and trip/profile persistence."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import pydantic
from sqlalchemy import Engine, create_engine, delete, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from triplog.db.schemas.base import Base
from triplog.db.schemas.profile import PROFILE_ROW_ID, ProfileRecord
from triplog.db.schemas.trip import TripRecord
from triplog.errors import StorageError, TripLogError, TripNotFoundError
from triplog.models import Profile, Trip
from triplog.services.migration import run_migrations

logger = logging.getLogger(__name__)


def _is_memory_url(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:")


def _apply_trip(record: TripRecord, trip: Trip) -> None:
    record.trip_date = trip.trip_date.isoformat()
    record.start_destination = trip.start_destination
    record.end_destination = trip.end_destination
    record.start_postal = trip.start_postal
    record.end_postal = trip.end_postal
    record.distance = trip.distance
    record.time = trip.time
    record.description = trip.description
    record.start_travel_time = trip.start_travel_time
    record.end_travel_time = trip.end_travel_time


class TripStore:
    def __init__(self, database_url: str, echo: bool = False) -> None:
        self._database_url = database_url
        self._echo = echo
        self._engine: Engine | None = None
        self._sessions: sessionmaker[Session] | None = None

    def connect(self) -> None:
        kwargs: dict[str, object] = {"echo": self._echo}
        if _is_memory_url(self._database_url):
            # one shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
            kwargs["connect_args"] = {"check_same_thread": False}
        self._engine = create_engine(self._database_url, **kwargs)
        self._sessions = sessionmaker(self._engine, expire_on_commit=False)

    def disconnect(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._sessions = None

    def _require_engine(self) -> Engine:
        """Return the engine or raise if not connected."""
        if self._engine is None:
            raise TripLogError("TripStore is not connected. Call connect() first.")
        return self._engine

    def _require_sessions(self) -> sessionmaker[Session]:
        if self._sessions is None:
            raise TripLogError("TripStore is not connected. Call connect() first.")
        return self._sessions

    @contextmanager
    def _transaction(self, action: str) -> Iterator[Session]:
        sessions = self._require_sessions()
        try:
            with sessions.begin() as session:
                yield session
        except TripLogError:
            raise
        except SQLAlchemyError as e:
            raise StorageError(f"{action} failed: {e}") from e
        except pydantic.ValidationError as e:
            raise StorageError(f"{action} failed, stored row is unreadable: {e}") from e

    def initialize(self) -> None:
        """Create missing tables and bring older databases up to date."""
        if self._engine is None:
            self.connect()
        engine = self._require_engine()
        try:
            Base.metadata.create_all(engine)
            if engine.dialect.name == "sqlite" and not _is_memory_url(self._database_url):
                with engine.connect() as conn:
                    conn.execute(text("PRAGMA journal_mode=WAL"))
            run_migrations(engine)
        except SQLAlchemyError as e:
            raise StorageError(f"Database initialization failed: {e}") from e
        logger.debug("Trip store ready at %s", engine.url.render_as_string(hide_password=True))

    def health_check(self) -> bool:
        try:
            with self._require_engine().connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception:
            return False

    # ----- Profile -----

    def get_profile(self) -> Profile | None:
        with self._transaction("Loading profile") as session:
            record = session.get(ProfileRecord, PROFILE_ROW_ID)
            return Profile.model_validate(record) if record is not None else None

    def save_profile(self, profile: Profile) -> None:
        """Overwrite the single profile row."""
        with self._transaction("Saving profile") as session:
            session.merge(
                ProfileRecord(
                    id=PROFILE_ROW_ID,
                    name=profile.name,
                    email=profile.email,
                    designation=profile.designation,
                    phone=profile.phone,
                    company=profile.company,
                )
            )

    # ----- Trips -----

    def add_trip(self, trip: Trip) -> Trip:
        with self._transaction("Adding trip") as session:
            record = TripRecord()
            _apply_trip(record, trip)
            session.add(record)
            session.flush()
            return Trip.model_validate(record)

    def update_trip(self, trip_id: int, trip: Trip) -> Trip:
        """Replace every field of an existing trip except its id."""
        with self._transaction("Updating trip") as session:
            record = session.get(TripRecord, trip_id)
            if record is None:
                raise TripNotFoundError(trip_id)
            _apply_trip(record, trip)
            session.flush()
            return Trip.model_validate(record)

    def get_trip_by_id(self, trip_id: int) -> Trip | None:
        with self._transaction("Loading trip") as session:
            record = session.get(TripRecord, trip_id)
            return Trip.model_validate(record) if record is not None else None

    def get_all_trips(self) -> list[Trip]:
        """All trips, newest date first, then by start time, then newest id."""
        stmt = select(TripRecord).order_by(
            TripRecord.trip_date.desc(),
            TripRecord.start_travel_time.asc(),
            TripRecord.id.desc(),
        )
        with self._transaction("Loading trips") as session:
            return [Trip.model_validate(record) for record in session.scalars(stmt)]

    def delete_trip(self, trip_id: int) -> bool:
        with self._transaction("Deleting trip") as session:
            result = session.execute(delete(TripRecord).where(TripRecord.id == trip_id))
            return result.rowcount > 0

    def clear_all_data(self) -> None:
        with self._transaction("Clearing data") as session:
            session.execute(delete(TripRecord))
            session.execute(delete(ProfileRecord))

    def __enter__(self) -> "TripStore":
        self.initialize()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
