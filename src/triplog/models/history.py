"""Pydantic models for aggregated trip history."""

from datetime import date

from pydantic import BaseModel

from triplog.models.trip import Trip
from triplog.services.duration import minutes_to_time


class Totals(BaseModel):
    total_minutes: int = 0
    total_miles: float = 0.0

    @property
    def duration(self) -> str:
        return minutes_to_time(self.total_minutes)


class DaySummary(BaseModel):
    trip_date: date
    trips: list[Trip]
    totals: Totals


class TripHistory(BaseModel):
    days: list[DaySummary]
    totals: Totals
    total_count: int

    @property
    def shown_count(self) -> int:
        return sum(len(day.trips) for day in self.days)

    @property
    def trips(self) -> list[Trip]:
        return [trip for day in self.days for trip in day.trips]
