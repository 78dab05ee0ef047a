"""HTML trip report rendering with Jinja2."""

import logging
from functools import lru_cache

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from triplog.errors import ExportError
from triplog.models import Profile, Trip, TripHistory
from triplog.services.aggregation import build_history
from triplog.services.formatting import format_date, format_miles, or_dash

logger = logging.getLogger(__name__)

REPORT_TITLE = "Trip Log Report"
REPORT_TEMPLATE = "report.html.j2"


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("triplog", "templates"),
        autoescape=select_autoescape(["html", "j2"]),
    )
    env.filters["long_date"] = format_date
    env.filters["miles"] = format_miles
    env.filters["or_dash"] = or_dash
    return env


def render_history(profile: Profile, history: TripHistory) -> str:
    try:
        template = get_environment().get_template(REPORT_TEMPLATE)
        return template.render(title=REPORT_TITLE, profile=profile, history=history)
    except TemplateError as e:
        raise ExportError(f"Report rendering failed: {e}") from e


def render_report(profile: Profile, trips: list[Trip]) -> str:
    """Render trips (already filtered) as a report: one section per day, newest first."""
    history = build_history(trips)
    logger.debug("Rendering report for %d trips over %d days", history.shown_count, len(history.days))
    return render_history(profile, history)
