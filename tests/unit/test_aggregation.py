from datetime import date

from triplog.models import Totals
from triplog.services.aggregation import (
    build_history,
    daily_totals,
    filter_by_date_range,
    grand_totals,
    group_by_date,
    trip_minutes,
)


def test_group_by_date_preserves_order(scenario_trips):
    groups = group_by_date(scenario_trips)
    assert list(groups) == [date(2024, 3, 2), date(2024, 3, 1)]
    assert [t.id for t in groups[date(2024, 3, 1)]] == [1, 2]


def test_daily_totals(scenario_trips):
    groups = group_by_date(scenario_trips)
    day1 = daily_totals(groups[date(2024, 3, 1)])
    day2 = daily_totals(groups[date(2024, 3, 2)])
    assert day1.total_miles == 8
    assert day1.duration == "00:45"
    assert day2.total_miles == 2
    assert day2.duration == "00:00"


def test_grand_totals(scenario_trips):
    totals = grand_totals(scenario_trips)
    assert totals.total_miles == 10
    assert totals.total_minutes == 45
    assert totals.duration == "00:45"


def test_partition_sums_match_grand_total(trip_factory):
    trips = [
        trip_factory(id=i, trip_date=date(2024, 1, 1 + i % 4), distance=1.5 * i, time=f"0{i % 3}:1{i % 6}")
        for i in range(1, 13)
    ]
    groups = group_by_date(trips)
    assert sum(daily_totals(day).total_miles for day in groups.values()) == grand_totals(trips).total_miles
    assert sum(daily_totals(day).total_minutes for day in groups.values()) == grand_totals(trips).total_minutes


def test_empty_list_totals():
    assert daily_totals([]) == Totals(total_minutes=0, total_miles=0.0)


def test_malformed_or_empty_time_counts_as_zero(trip_factory):
    assert trip_minutes(trip_factory(time="")) == 0
    assert trip_minutes(trip_factory(time="about an hour")) == 0
    totals = daily_totals([trip_factory(time="1h"), trip_factory(time="01:10")])
    assert totals.total_minutes == 70


def test_filter_by_date_range_inclusive(trip_factory):
    trips = [trip_factory(id=day, trip_date=date(2024, 1, day)) for day in range(1, 8)]
    result = filter_by_date_range(trips, date(2024, 1, 2), date(2024, 1, 5))
    assert [t.trip_date.day for t in result] == [2, 3, 4, 5]
    assert all(date(2024, 1, 2) <= t.trip_date <= date(2024, 1, 5) for t in result)


def test_filter_by_date_range_open_bounds(trip_factory):
    trips = [trip_factory(id=day, trip_date=date(2024, 1, day)) for day in range(1, 8)]
    assert len(filter_by_date_range(trips)) == 7
    assert [t.trip_date.day for t in filter_by_date_range(trips, date_from=date(2024, 1, 6))] == [6, 7]
    assert [t.trip_date.day for t in filter_by_date_range(trips, date_to=date(2024, 1, 2))] == [1, 2]


def test_build_history_sorts_days_descending(scenario_trips):
    history = build_history(list(reversed(scenario_trips)))
    assert [d.trip_date for d in history.days] == [date(2024, 3, 2), date(2024, 3, 1)]
    assert history.days[1].totals.total_miles == 8
    assert history.totals.total_miles == 10
    assert history.shown_count == 3
    assert history.total_count == 3


def test_build_history_counts_filtered(scenario_trips):
    history = build_history(scenario_trips, date_from=date(2024, 3, 2))
    assert history.shown_count == 1
    assert history.total_count == 3
    assert history.totals.total_miles == 2


def test_negative_stored_time_does_not_break_totals(trip_factory):
    totals = daily_totals([trip_factory(time="-1:30"), trip_factory(time="00:20")])
    assert totals.total_minutes == 20
    assert totals.duration == "00:20"
