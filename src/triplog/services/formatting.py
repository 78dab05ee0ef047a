"""Display formatting shared by the report and the command line."""

from datetime import date


def format_date(value: date) -> str:
    """Long en-GB style date, e.g. ``Friday, 1 March 2024``."""
    return f"{value:%A}, {value.day} {value:%B %Y}"


def format_miles(value: float) -> str:
    """Miles rounded to two decimals without trailing zeros (``8``, ``10.5``)."""
    text = f"{round(value, 2):.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def or_dash(value: str | None) -> str:
    return value if value else "-"
