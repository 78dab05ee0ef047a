"""Clock-time arithmetic on ``HH:MM`` strings."""

MINUTES_PER_DAY = 24 * 60


def time_to_minutes(value: str) -> int:
    """Convert ``HH:MM`` to minutes past midnight (or a summed duration).

    Raises ValueError unless the value is two colon-separated non-negative
    integers with minutes below 60.
    """
    parts = value.split(":")
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise ValueError(f"Not an HH:MM value: {value!r}")
    hours, minutes = (int(part) for part in parts)
    if minutes >= 60:
        raise ValueError(f"Minutes out of range in {value!r}")
    return hours * 60 + minutes


def minutes_to_time(minutes: int) -> str:
    """Format a minute count as ``HH:MM``; hours may exceed 24 for totals."""
    if minutes < 0:
        raise ValueError(f"Negative minute count: {minutes}")
    hours, mins = divmod(int(minutes), 60)
    return f"{hours:02d}:{mins:02d}"


def compute_elapsed(start: str | None, end: str | None) -> str:
    """Elapsed ``HH:MM`` from start to end, crossing midnight at most once.

    Returns an empty string when either time is absent or unparseable.
    """
    if not start or not end:
        return ""
    try:
        diff = time_to_minutes(end) - time_to_minutes(start)
    except ValueError:
        return ""
    if diff < 0:
        diff += MINUTES_PER_DAY
    if diff < 0:
        return ""
    return minutes_to_time(diff)
