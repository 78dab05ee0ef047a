"""Date-range filtering, grouping by day and distance/duration totals."""

import logging
from collections.abc import Iterable
from datetime import date

from triplog.models import DaySummary, Totals, Trip, TripHistory
from triplog.services.duration import time_to_minutes

logger = logging.getLogger(__name__)


def trip_minutes(trip: Trip) -> int:
    """Minutes recorded on a trip; empty or malformed durations count as zero."""
    if not trip.time:
        return 0
    try:
        return time_to_minutes(trip.time)
    except ValueError:
        logger.debug("Trip %s has unparseable duration %r, counting as 0", trip.id, trip.time)
        return 0


def filter_by_date_range(
    trips: Iterable[Trip],
    date_from: date | None = None,
    date_to: date | None = None,
) -> list[Trip]:
    """Keep trips dated within the inclusive range; a missing bound is unbounded."""
    result = []
    for trip in trips:
        if date_from is not None and trip.trip_date < date_from:
            continue
        if date_to is not None and trip.trip_date > date_to:
            continue
        result.append(trip)
    return result


def group_by_date(trips: Iterable[Trip]) -> dict[date, list[Trip]]:
    """Group trips by date, keeping input order within each group."""
    groups: dict[date, list[Trip]] = {}
    for trip in trips:
        groups.setdefault(trip.trip_date, []).append(trip)
    return groups


def daily_totals(trips: Iterable[Trip]) -> Totals:
    total_minutes = 0
    total_miles = 0.0
    for trip in trips:
        total_minutes += trip_minutes(trip)
        total_miles += trip.distance
    return Totals(total_minutes=total_minutes, total_miles=total_miles)


def grand_totals(trips: Iterable[Trip]) -> Totals:
    """Totals across every trip in view, independent of grouping."""
    return daily_totals(trips)


def build_history(
    trips: list[Trip],
    date_from: date | None = None,
    date_to: date | None = None,
) -> TripHistory:
    """Filter, group and total trips for display, newest day first."""
    filtered = filter_by_date_range(trips, date_from, date_to)
    groups = group_by_date(filtered)
    days = [
        DaySummary(trip_date=trip_date, trips=groups[trip_date], totals=daily_totals(groups[trip_date]))
        for trip_date in sorted(groups, reverse=True)
    ]
    return TripHistory(days=days, totals=grand_totals(filtered), total_count=len(trips))
