"""Row-level GTFS entities handed to the policy hooks (read-only)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import pandas as pd


def _text(row: Mapping[str, Any], key: str) -> str:
    """Feed text value; missing and NA cells become ''."""
    v = row.get(key)
    if v is None or pd.isna(v):
        return ""
    return str(v)


class Direction(str, Enum):
    """Compass heading assigned to a trip."""

    NORTH = "north"
    SOUTH = "south"


@dataclass(frozen=True)
class Route:
    route_id: str
    short_name: str = ""
    long_name: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Route:
        return cls(
            route_id=_text(row, "route_id"),
            short_name=_text(row, "route_short_name"),
            long_name=_text(row, "route_long_name"),
        )


@dataclass(frozen=True)
class Trip:
    trip_id: str
    route_id: str
    service_id: str
    direction_id: int | None = None
    headsign: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Trip:
        raw_dir = _text(row, "direction_id").strip()
        numeric = raw_dir.isascii() and raw_dir.removeprefix("-").isdigit()
        return cls(
            trip_id=_text(row, "trip_id"),
            route_id=_text(row, "route_id"),
            service_id=_text(row, "service_id"),
            direction_id=int(raw_dir) if numeric else None,
            headsign=_text(row, "trip_headsign"),
        )


@dataclass(frozen=True)
class Stop:
    stop_id: str
    name: str = ""
    code: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Stop:
        return cls(
            stop_id=_text(row, "stop_id"),
            name=_text(row, "stop_name"),
            code=_text(row, "stop_code"),
        )


@dataclass(frozen=True)
class CalendarRow:
    service_id: str
    start_date: str = ""
    end_date: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> CalendarRow:
        return cls(
            service_id=_text(row, "service_id"),
            start_date=_text(row, "start_date"),
            end_date=_text(row, "end_date"),
        )


@dataclass(frozen=True)
class CalendarDateRow:
    service_id: str
    date: str = ""
    exception_type: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> CalendarDateRow:
        return cls(
            service_id=_text(row, "service_id"),
            date=_text(row, "date"),
            exception_type=_text(row, "exception_type"),
        )
