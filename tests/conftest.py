"""Shared test fixtures for the trip logger."""

import sys
from datetime import date
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def make_trip(**overrides):
    from triplog.models import Trip

    fields = dict(
        id=1,
        trip_date=date(2024, 3, 1),
        start_destination="Home",
        end_destination="Office",
        start_postal="AB1 2CD",
        end_postal="EF3 4GH",
        distance=5.0,
        start_travel_time="08:00",
        end_travel_time="08:30",
        time="00:30",
        description="",
    )
    fields.update(overrides)
    return Trip(**fields)


@pytest.fixture
def trip_factory():
    return make_trip


@pytest.fixture
def scenario_trips():
    """Three trips over two days, in store order (newest day first)."""
    return [
        make_trip(id=3, trip_date=date(2024, 3, 2), start_travel_time="10:00", end_travel_time="10:00",
                  time="00:00", distance=2.0, start_destination="Office", end_destination="Depot"),
        make_trip(id=1, trip_date=date(2024, 3, 1), distance=5.0),
        make_trip(id=2, trip_date=date(2024, 3, 1), start_travel_time="09:00", end_travel_time="09:15",
                  time="00:15", distance=3.0, start_destination="Office", end_destination="Client"),
    ]


@pytest.fixture
def valid_profile_data():
    return dict(
        name="Sam Carter",
        email="sam@example.com",
        designation="Field Engineer",
        phone="",
        company="Acme Ltd",
    )


# SQLite fixtures
@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'triplog.db'}"


@pytest.fixture
def trip_store(database_url):
    """Provide an initialized TripStore backed by a fresh SQLite file."""
    from triplog.db import TripStore

    with TripStore(database_url) as store:
        yield store
