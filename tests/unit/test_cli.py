"""Command-line tests against a real SQLite file in tmp_path."""

import os
from unittest.mock import patch

import pytest

from triplog.cli import build_parser, main
from triplog.config import _reset_config


@pytest.fixture(autouse=True)
def _env(tmp_path):
    _reset_config()
    env = {
        "TRIPLOG_DATABASE_URL": f"sqlite:///{tmp_path / 'cli.db'}",
        "TRIPLOG_REPORT_DIR": str(tmp_path / "reports"),
        "TRIPLOG_LOG_LEVEL": "WARNING",
    }
    with patch.dict(os.environ, env):
        yield
    _reset_config()


ADD_ARGS = [
    "trip", "add", "--date", "2024-03-01", "--from", "Home", "--to", "Office",
    "--distance", "5", "--start-time", "08:00", "--end-time", "08:30",
]


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_parser_rejects_bad_range_date():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["trips", "--from", "March"])


def test_add_and_list(capsys):
    assert main(ADD_ARGS) == 0
    assert "Trip #1 logged (00:30)." in capsys.readouterr().out

    assert main(["trips"]) == 0
    out = capsys.readouterr().out
    assert "Friday, 1 March 2024 — 5 miles, 00:30" in out
    assert "Showing 1 of 1 trips" in out
    assert "GRAND TOTAL: 5 miles — 00:30" in out


def test_add_invalid_distance(capsys):
    assert main([*ADD_ARGS[:-6], "--distance", "0", "--start-time", "08:00", "--end-time", "08:30"]) == 1
    assert "Distance must be greater than zero." in capsys.readouterr().err
    assert main(["trips"]) == 0
    assert "No trips found." in capsys.readouterr().out


def test_edit_keeps_unspecified_fields(capsys):
    main(ADD_ARGS)
    assert main(["trip", "edit", "1", "--end-time", "09:00"]) == 0
    assert "Trip #1 updated (01:00)." in capsys.readouterr().out

    main(["trip", "show", "1"])
    out = capsys.readouterr().out
    assert "Home → Office" in out
    assert "08:00-09:00" in out


def test_edit_unknown_trip(capsys):
    assert main(["trip", "edit", "42", "--distance", "3"]) == 1
    assert "Trip not found." in capsys.readouterr().err


def test_delete(capsys):
    main(ADD_ARGS)
    assert main(["trip", "delete", "1"]) == 0
    assert "Trip #1 deleted." in capsys.readouterr().out
    assert main(["trip", "show", "1"]) == 1


def test_profile_set_and_show(capsys):
    assert main(["profile", "set", "--name", "Sam Carter", "--email", "sam@example.com"]) == 0
    capsys.readouterr()
    assert main(["profile", "show"]) == 0
    out = capsys.readouterr().out
    assert "Name: Sam Carter" in out
    assert "Company: -" in out


def test_profile_invalid_email(capsys):
    assert main(["profile", "set", "--name", "Sam", "--email", "sam.example.com"]) == 1
    assert "Please enter a valid email address." in capsys.readouterr().err


def test_export_writes_report(tmp_path, capsys):
    main(["profile", "set", "--name", "Sam Carter", "--email", "sam@example.com"])
    main(ADD_ARGS)
    capsys.readouterr()

    assert main(["export", "--out", str(tmp_path / "out")]) == 0
    assert "Report written to" in capsys.readouterr().out
    reports = list((tmp_path / "out").glob("*.html"))
    assert len(reports) == 1
    assert "GRAND TOTAL: 5 miles — 00:30" in reports[0].read_text(encoding="utf-8")


def test_export_without_profile(capsys):
    main(ADD_ARGS)
    assert main(["export"]) == 1
    assert "Please set up your profile first." in capsys.readouterr().err


def test_suggest(capsys):
    main(ADD_ARGS)
    capsys.readouterr()
    assert main(["suggest", "end", "off"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Office"]


def test_reset_needs_confirmation(capsys):
    main(ADD_ARGS)
    assert main(["reset"]) == 1
    assert main(["reset", "--yes"]) == 0
    capsys.readouterr()
    main(["trips"])
    assert "No trips found." in capsys.readouterr().out


def test_unreadable_stored_trip_reports_failure(tmp_path, capsys):
    import sqlite3

    main(ADD_ARGS)
    conn = sqlite3.connect(tmp_path / "cli.db")
    conn.execute(
        "INSERT INTO trips (tripDate, startDestination, endDestination, distance, time) "
        "VALUES ('3/1/2024', 'A', 'B', 1.0, '00:10')"
    )
    conn.commit()
    conn.close()
    capsys.readouterr()

    assert main(["trips"]) == 1
    assert "Failed to save or load your data. Please try again." in capsys.readouterr().err
