"""
Pydantic models for the trip logger.
"""

from triplog.models.history import DaySummary, Totals, TripHistory
from triplog.models.profile import Profile
from triplog.models.trip import Trip, TripDraft

__all__ = ["DaySummary", "Profile", "Totals", "Trip", "TripDraft", "TripHistory"]
