"""Profile and trip flows — validation boundary in front of the trip store."""

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

import pydantic

from triplog.db import TripStore
from triplog.errors import ErrorCode, ExportError, TripNotFoundError, ValidationError
from triplog.models import Profile, Trip, TripDraft, TripHistory
from triplog.services.aggregation import build_history
from triplog.services.duration import compute_elapsed
from triplog.services.report import REPORT_TITLE, render_report
from triplog.services.sharing import ReportSharer

logger = logging.getLogger(__name__)

_FIELD_CODES: dict[str, ErrorCode] = {
    "trip_date": ErrorCode.INVALID_DATE,
    "distance": ErrorCode.INVALID_DISTANCE,
    "start_travel_time": ErrorCode.INVALID_TIME,
    "end_travel_time": ErrorCode.INVALID_TIME,
    "email": ErrorCode.INVALID_EMAIL,
}

DESTINATION_FIELDS = {"start": "start_destination", "end": "end_destination"}


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _validation_error(exc: pydantic.ValidationError) -> ValidationError:
    """Map the first pydantic failure to one user-facing error code."""
    first = exc.errors()[0]
    field = str(first["loc"][0]) if first["loc"] else ""
    if first["type"] == "missing" or _is_blank(first.get("input")):
        code = ErrorCode.MISSING_FIELDS
    else:
        code = _FIELD_CODES.get(field, ErrorCode.INVALID_INPUT)
    return ValidationError(f"{field or 'input'}: {first['msg']}", code=code)


def _drop_unset(data: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


# ----- Profile -----


def get_profile(store: TripStore) -> Profile | None:
    return store.get_profile()


def save_profile(store: TripStore, data: Mapping[str, Any]) -> Profile:
    try:
        profile = Profile.model_validate(_drop_unset(data))
    except pydantic.ValidationError as e:
        raise _validation_error(e) from e

    store.save_profile(profile)
    logger.info("Profile saved for %s", profile.email)
    return profile


# ----- Trips -----


def parse_draft(data: Mapping[str, Any]) -> TripDraft:
    try:
        return TripDraft.model_validate(_drop_unset(data))
    except pydantic.ValidationError as e:
        raise _validation_error(e) from e


def build_trip(draft: TripDraft, trip_id: int | None = None) -> Trip:
    """Turn a validated draft into a storable trip, deriving the elapsed time."""
    elapsed = compute_elapsed(draft.start_travel_time, draft.end_travel_time)
    if not elapsed:
        raise ValidationError(
            f"Cannot compute duration from {draft.start_travel_time} to {draft.end_travel_time}",
            code=ErrorCode.INVALID_TIME,
        )
    return Trip(id=trip_id, time=elapsed, **draft.model_dump())


def draft_fields(trip: Trip) -> dict[str, Any]:
    """Editable fields of a stored trip, as accepted by parse_draft."""
    return trip.model_dump(exclude={"id", "time"})


def add_trip(store: TripStore, data: Mapping[str, Any]) -> Trip:
    trip = build_trip(parse_draft(data))
    saved = store.add_trip(trip)
    logger.info("Trip %s logged: %s -> %s", saved.id, saved.start_destination, saved.end_destination)
    return saved


def load_trip(store: TripStore, trip_id: int) -> Trip:
    trip = store.get_trip_by_id(trip_id)
    if trip is None:
        raise TripNotFoundError(trip_id)
    return trip


def edit_trip(store: TripStore, trip_id: int, data: Mapping[str, Any]) -> Trip:
    """Replace every field of an existing trip except its id."""
    load_trip(store, trip_id)
    trip = build_trip(parse_draft(data), trip_id=trip_id)
    saved = store.update_trip(trip_id, trip)
    logger.info("Trip %s updated", trip_id)
    return saved


def delete_trip(store: TripStore, trip_id: int) -> bool:
    deleted = store.delete_trip(trip_id)
    if deleted:
        logger.info("Trip %s deleted", trip_id)
    else:
        logger.info("Trip %s was already gone", trip_id)
    return deleted


def trip_history(
    store: TripStore,
    date_from: date | None = None,
    date_to: date | None = None,
) -> TripHistory:
    return build_history(store.get_all_trips(), date_from, date_to)


def suggest_destinations(trips: Iterable[Trip], typed: str, which: str = "start") -> list[str]:
    """Previously used destinations containing the typed text, first-seen order."""
    needle = typed.strip().lower()
    if not needle:
        return []
    attr = DESTINATION_FIELDS[which]
    seen: dict[str, None] = {}
    for trip in trips:
        value = getattr(trip, attr)
        if value and needle in value.lower():
            seen.setdefault(value, None)
    return list(seen)


def export_report(
    store: TripStore,
    sharer: ReportSharer,
    date_from: date | None = None,
    date_to: date | None = None,
) -> str:
    """Render the trips in range and hand the report to the sharer."""
    profile = store.get_profile()
    if profile is None:
        raise ValidationError("No profile saved", code=ErrorCode.PROFILE_REQUIRED)

    history = trip_history(store, date_from, date_to)
    if not history.days:
        raise ValidationError("No trips in the selected range", code=ErrorCode.NO_TRIPS)

    html = render_report(profile, history.trips)
    try:
        location = sharer.share(html, REPORT_TITLE)
    except ExportError:
        raise
    except Exception as e:
        raise ExportError(f"Sharing report failed: {e}") from e

    logger.info("Exported %d trips to %s", history.shown_count, location)
    return location


def reset_all(store: TripStore) -> None:
    store.clear_all_data()
    logger.info("All trips and the profile were cleared")
