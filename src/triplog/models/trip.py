from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

# 24-hour clock, single-digit hours accepted and normalised to HH:MM
TIME_PATTERN = r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$"


def _pad_clock(value: str) -> str:
    hours, minutes = value.split(":")
    return f"{int(hours):02d}:{int(minutes):02d}"


class TripDraft(BaseModel):
    """User-supplied fields of a trip, validated before anything is stored.

    The elapsed ``time`` is not part of the draft: it is derived from the two
    travel times when the trip is saved.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    trip_date: date = Field(default_factory=date.today)
    start_destination: str = Field(..., min_length=1)
    end_destination: str = Field(..., min_length=1)
    start_postal: str = ""
    end_postal: str = ""
    distance: float = Field(..., gt=0, allow_inf_nan=False)
    start_travel_time: str = Field(..., pattern=TIME_PATTERN)
    end_travel_time: str = Field(..., pattern=TIME_PATTERN)
    description: str = ""

    @field_validator("start_travel_time", "end_travel_time")
    @classmethod
    def pad_clock(cls, value: str) -> str:
        return _pad_clock(value)


class Trip(BaseModel):
    """A stored trip. Legacy rows may lack travel times."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    trip_date: date
    start_destination: str
    end_destination: str
    start_postal: str = ""
    end_postal: str = ""
    distance: float
    start_travel_time: str | None = None
    end_travel_time: str | None = None
    time: str = ""
    description: str = ""

    @field_validator("start_postal", "end_postal", "time", "description", mode="before")
    @classmethod
    def none_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("start_travel_time", "end_travel_time", mode="before")
    @classmethod
    def empty_as_none(cls, value: object) -> object:
        return None if value == "" else value
