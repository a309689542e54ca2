"""Schema definitions for GTFS table contracts.

This module contains only:
- `TableSchema` (schema metadata container)
- concrete GTFS table schemas (e.g., `ROUTES`, `TRIPS`, ...)

Every column is read as a string; numeric interpretation happens in the policy hooks.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, Field


class TableSchema(BaseModel):
    """A simple schema for a pandas DataFrame (column-level contract)."""

    name: str
    required_columns: tuple[str, ...] = Field(default_factory=tuple)
    optional_columns: tuple[str, ...] = Field(default_factory=tuple)
    # pandas dtype strings, e.g. "string", "Float64", "Int64"
    dtypes: Mapping[str, str] = Field(default_factory=dict)
    non_null: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def filename(self) -> str:
        return f"{self.name}.txt"

    def allowed_columns(self) -> set[str]:
        return set(self.required_columns) | set(self.optional_columns)

    def columns(self) -> list[str]:
        return [*self.required_columns, *self.optional_columns]


def _strings(*cols: str) -> dict[str, str]:
    return {c: "string" for c in cols}


ROUTES = TableSchema(
    name="routes",
    required_columns=("route_id", "route_short_name", "route_long_name", "route_type"),
    optional_columns=("agency_id", "route_desc", "route_url", "route_color", "route_text_color"),
    dtypes=_strings(
        "route_id",
        "route_short_name",
        "route_long_name",
        "route_type",
        "agency_id",
        "route_desc",
        "route_url",
        "route_color",
        "route_text_color",
    ),
    non_null=("route_id",),
)

TRIPS = TableSchema(
    name="trips",
    required_columns=("route_id", "service_id", "trip_id"),
    optional_columns=("trip_headsign", "direction_id", "block_id", "shape_id"),
    dtypes=_strings(
        "route_id", "service_id", "trip_id", "trip_headsign", "direction_id", "block_id", "shape_id"
    ),
    non_null=("route_id", "service_id", "trip_id"),
)

STOPS = TableSchema(
    name="stops",
    required_columns=("stop_id", "stop_name"),
    optional_columns=("stop_code", "stop_lat", "stop_lon", "zone_id", "location_type"),
    dtypes=_strings("stop_id", "stop_name", "stop_code", "stop_lat", "stop_lon", "zone_id", "location_type"),
    non_null=("stop_id",),
)

CALENDAR = TableSchema(
    name="calendar",
    required_columns=(
        "service_id",
        "monday",
        "tuesday",
        "wednesday",
        "thursday",
        "friday",
        "saturday",
        "sunday",
        "start_date",
        "end_date",
    ),
    dtypes=_strings(
        "service_id",
        "monday",
        "tuesday",
        "wednesday",
        "thursday",
        "friday",
        "saturday",
        "sunday",
        "start_date",
        "end_date",
    ),
    non_null=("service_id",),
)

CALENDAR_DATES = TableSchema(
    name="calendar_dates",
    required_columns=("service_id", "date", "exception_type"),
    dtypes=_strings("service_id", "date", "exception_type"),
    non_null=("service_id", "date"),
)

STOP_TIMES = TableSchema(
    name="stop_times",
    required_columns=("trip_id", "arrival_time", "departure_time", "stop_id", "stop_sequence"),
    optional_columns=("pickup_type", "drop_off_type", "shape_dist_traveled"),
    dtypes=_strings(
        "trip_id",
        "arrival_time",
        "departure_time",
        "stop_id",
        "stop_sequence",
        "pickup_type",
        "drop_off_type",
        "shape_dist_traveled",
    ),
    non_null=("trip_id", "stop_id"),
)

# Output contracts for the generated feed
OUT_AGENCY = TableSchema(
    name="agency",
    required_columns=("agency_name", "agency_color", "route_type"),
    dtypes=_strings("agency_name", "agency_color") | {"route_type": "Int64"},
    non_null=("agency_name",),
)

OUT_ROUTES = TableSchema(
    name="routes",
    required_columns=("route_id", "route_short_name", "route_long_name", "route_color", "route_type"),
    dtypes={
        "route_id": "Int64",
        "route_short_name": "string",
        "route_long_name": "string",
        "route_color": "string",
        "route_type": "Int64",
    },
    non_null=("route_id", "route_short_name"),
)

OUT_TRIPS = TableSchema(
    name="trips",
    required_columns=("trip_id", "route_id", "service_id", "direction_id", "direction", "trip_headsign"),
    dtypes={
        "trip_id": "string",
        "route_id": "Int64",
        "service_id": "string",
        "direction_id": "Int64",
        "direction": "string",
        "trip_headsign": "string",
    },
    non_null=("trip_id", "route_id", "direction"),
)

OUT_STOPS = TableSchema(
    name="stops",
    required_columns=("stop_id", "stop_name"),
    optional_columns=("stop_code", "stop_lat", "stop_lon"),
    dtypes={
        "stop_id": "Int64",
        "stop_name": "string",
        "stop_code": "string",
        "stop_lat": "Float64",
        "stop_lon": "Float64",
    },
    non_null=("stop_id",),
)

INPUT_TABLES: tuple[TableSchema, ...] = (ROUTES, TRIPS, STOPS, CALENDAR, CALENDAR_DATES, STOP_TIMES)
# Tables a feed may omit (a feed needs calendar or calendar_dates, not both)
OPTIONAL_TABLES: frozenset[str] = frozenset({"calendar", "calendar_dates", "stop_times"})
