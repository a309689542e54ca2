"""Pydantic table contracts, row entities and dataframe schema validators.

These are contracts to keep the pipeline deterministic:
- Feed tables are validated at the read/write boundary.
- Policy hooks receive frozen row entities, never raw dataframes.
"""

from __future__ import annotations

from ferry_gtfs.models.entities import (
    CalendarDateRow,
    CalendarRow,
    Direction,
    Route,
    Stop,
    Trip,
)
from ferry_gtfs.models.schemas import (
    CALENDAR,
    CALENDAR_DATES,
    ROUTES,
    STOP_TIMES,
    STOPS,
    TRIPS,
    TableSchema,
)
from ferry_gtfs.models.validate import empty_frame, validate_df

__all__ = [
    "TableSchema",
    "validate_df",
    "empty_frame",
    "ROUTES",
    "TRIPS",
    "STOPS",
    "CALENDAR",
    "CALENDAR_DATES",
    "STOP_TIMES",
    "Route",
    "Trip",
    "Stop",
    "CalendarRow",
    "CalendarDateRow",
    "Direction",
]
