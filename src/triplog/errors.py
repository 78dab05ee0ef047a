"""
Custom exceptions and error handling for the trip logger.

Defines application-specific exceptions with error codes so every flow
reports failures the same way: the internal message goes to the log, the
user only ever sees the message mapped from the code.

Usage:
    from triplog.errors import ValidationError, ErrorCode

    raise ValidationError("distance must be positive", code=ErrorCode.INVALID_DISTANCE)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for user-facing error messages."""

    # Validation errors
    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_DISTANCE = "INVALID_DISTANCE"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_TIME = "INVALID_TIME"
    INVALID_DATE = "INVALID_DATE"
    INVALID_INPUT = "INVALID_INPUT"
    PROFILE_REQUIRED = "PROFILE_REQUIRED"
    NO_TRIPS = "NO_TRIPS"

    # Storage errors
    STORAGE_FAILED = "STORAGE_FAILED"
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"

    # Export errors
    EXPORT_FAILED = "EXPORT_FAILED"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.MISSING_FIELDS: "Please fill all required fields including both times.",
    ErrorCode.INVALID_DISTANCE: "Distance must be greater than zero.",
    ErrorCode.INVALID_EMAIL: "Please enter a valid email address.",
    ErrorCode.INVALID_TIME: "Please enter travel times in HH:MM format (24-hour). Example: 08:30 or 17:45",
    ErrorCode.INVALID_DATE: "Please enter dates in YYYY-MM-DD format.",
    ErrorCode.INVALID_INPUT: "Some of the information entered is not valid. Please check and try again.",
    ErrorCode.PROFILE_REQUIRED: "Please set up your profile first.",
    ErrorCode.NO_TRIPS: "No trips to export in the selected range.",
    ErrorCode.STORAGE_FAILED: "Failed to save or load your data. Please try again.",
    ErrorCode.TRIP_NOT_FOUND: "Trip not found.",
    ErrorCode.EXPORT_FAILED: "The report could not be exported. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class TripLogError(Exception):
    """Base exception for all trip logger errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class ValidationError(TripLogError):
    """Input failed validation before reaching storage."""

    pass


class StorageError(TripLogError):
    """The persistence gateway failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.STORAGE_FAILED):
        super().__init__(message, code=code)


class TripNotFoundError(StorageError):
    """No trip exists with the requested id."""

    def __init__(self, trip_id: int):
        self.trip_id = trip_id
        super().__init__(f"Trip {trip_id} does not exist", code=ErrorCode.TRIP_NOT_FOUND)


class ExportError(TripLogError):
    """Rendering or sharing a report failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.EXPORT_FAILED):
        super().__init__(message, code=code)
