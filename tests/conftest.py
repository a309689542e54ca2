"""Shared fixtures: a small TransLink-like feed with the SeaBus and one bus route."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from ferry_gtfs.core.config import AgencyConfig
from ferry_gtfs.io import GtfsFeed, read_feed
from ferry_gtfs.policy.seabus import SeaBusPolicy

FEED_FILES: dict[str, str] = {
    "routes.txt": (
        "route_id,agency_id,route_short_name,route_long_name,route_type,route_color\n"
        "6771,TL,998,SeaBus,4,\n"
        "6612,TL,099,COMMERCIAL-BROADWAY/UBC (B-LINE),3,\n"
    ),
    "trips.txt": (
        "route_id,service_id,trip_id,trip_headsign,direction_id,block_id,shape_id\n"
        "6771,1,T1,Lonsdale Quay SeaBus Northbound,0,,\n"
        "6771,1,T2,Waterfront Stn SeaBus Southbound,1,,\n"
        "6771,2,T3,Lonsdale Quay SeaBus Northbound,0,,\n"
        "6612,3,T4,UBC,0,,\n"
    ),
    "stops.txt": (
        "stop_id,stop_code,stop_name,stop_lat,stop_lon\n"
        "8043,,Lonsdale Quay SeaBus Northbound,49.3101,-123.0829\n"
        "8044,61234,Waterfront Station SeaBus Southbound,49.2859,-123.1117\n"
        "1,50001,UBC Exchange Bay 07,49.2675,-123.2470\n"
    ),
    "calendar.txt": (
        "service_id,monday,tuesday,wednesday,thursday,friday,saturday,sunday,start_date,end_date\n"
        "1,1,1,1,1,1,0,0,20240101,20241231\n"
        "2,0,0,0,0,0,1,1,20240101,20241231\n"
        "3,1,1,1,1,1,1,1,20240101,20241231\n"
    ),
    "calendar_dates.txt": (
        "service_id,date,exception_type\n"
        "1,20241225,2\n"
        "3,20241225,2\n"
    ),
    "stop_times.txt": (
        "trip_id,arrival_time,departure_time,stop_id,stop_sequence\n"
        "T1,06:02:00,06:02:00,8044,1\n"
        "T1,06:14:00,06:14:00,8043,2\n"
        "T2,06:17:00,06:17:00,8043,1\n"
        "T2,06:29:00,06:29:00,8044,2\n"
        "T3,08:02:00,08:02:00,8044,1\n"
        "T3,08:14:00,08:14:00,8043,2\n"
        "T4,07:00:00,07:00:00,1,1\n"
    ),
}


def write_feed_dir(root: Path, files: dict[str, str]) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for name, text in files.items():
        (root / name).write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def feed_files() -> dict[str, str]:
    return dict(FEED_FILES)


@pytest.fixture
def feed_dir(tmp_path, feed_files) -> Path:
    return write_feed_dir(tmp_path / "gtfs", feed_files)


@pytest.fixture
def feed_zip(tmp_path, feed_files) -> Path:
    path = tmp_path / "gtfs.zip"
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, text in feed_files.items():
            zf.writestr(name, text)
    return path


@pytest.fixture
def feed(feed_dir) -> GtfsFeed:
    return read_feed(feed_dir)


@pytest.fixture
def policy() -> SeaBusPolicy:
    return SeaBusPolicy(AgencyConfig())


@pytest.fixture
def make_feed(tmp_path):
    """Build a feed from (possibly edited) file contents."""

    def _make(name: str, files: dict[str, str]) -> GtfsFeed:
        return read_feed(write_feed_dir(tmp_path / name, files))

    return _make
