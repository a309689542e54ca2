from __future__ import annotations

import pandas as pd
import pytest

from ferry_gtfs.io import read_feed, read_json, write_feed, write_run_summary


def test_read_feed_from_directory(feed_dir):
    feed = read_feed(feed_dir)
    assert len(feed.routes) == 2
    assert len(feed.trips) == 4
    assert feed.routes["route_short_name"].tolist() == ["998", "099"]
    # empty cells stay empty strings, never NaN
    assert feed.stops.loc[0, "stop_code"] == ""


def test_read_feed_from_zip(feed_zip):
    feed = read_feed(feed_zip)
    assert len(feed.stop_times) == 7
    assert set(feed.tables()) == {
        "routes",
        "trips",
        "stops",
        "calendar",
        "calendar_dates",
        "stop_times",
    }


def test_optional_tables_may_be_missing(make_feed, feed_files):
    del feed_files["calendar.txt"]
    feed = make_feed("no_calendar", feed_files)
    assert feed.calendar.empty
    assert "service_id" in feed.calendar.columns


def test_required_table_missing(make_feed, feed_files):
    del feed_files["trips.txt"]
    with pytest.raises(FileNotFoundError, match="trips.txt"):
        make_feed("no_trips", feed_files)


def test_missing_feed(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_feed(tmp_path / "nope.zip")


def test_required_columns_are_checked(make_feed, feed_files):
    feed_files["routes.txt"] = "route_id,route_type\n6771,4\n"
    with pytest.raises(ValueError, match="missing required columns"):
        make_feed("bad_routes", feed_files)


def test_write_feed_and_summary(tmp_path):
    tables = {"routes": pd.DataFrame({"route_id": [6771], "route_short_name": ["SB"]})}
    written = write_feed(tables, tmp_path / "out")
    assert [p.name for p in written] == ["routes.txt"]
    assert written[0].read_text(encoding="utf-8").splitlines() == [
        "route_id,route_short_name",
        "6771,SB",
    ]

    path = write_run_summary({"routes": 1}, tmp_path / "_meta")
    assert read_json(path) == {"routes": 1}
