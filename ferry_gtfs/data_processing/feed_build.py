"""Apply an agency policy to a parsed GTFS feed and build the output tables.

Design goals:
- Deterministic outputs (stable sorting, no timestamps).
- Keep row decisions in the policy hooks; this module only walks the tables.
- Policy errors propagate: a run either completes or aborts.
"""

from __future__ import annotations

import logging
import time
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from ferry_gtfs.core.cli_utils import pretty_duration
from ferry_gtfs.io import GtfsFeed
from ferry_gtfs.models.entities import CalendarDateRow, CalendarRow, Route, Stop, Trip
from ferry_gtfs.models.schemas import (
    CALENDAR,
    CALENDAR_DATES,
    OUT_AGENCY,
    OUT_ROUTES,
    OUT_STOPS,
    OUT_TRIPS,
    STOP_TIMES,
    TableSchema,
)
from ferry_gtfs.models.validate import empty_frame, validate_df
from ferry_gtfs.policy.base import AgencyPolicy, parse_int
from ferry_gtfs.policy.service_ids import ServiceIdFilter, compute_useful_service_ids

LOGGER = logging.getLogger(__name__)

STOP_TIMES_OUT_COLUMNS: tuple[str, ...] = (
    "trip_id",
    "arrival_time",
    "departure_time",
    "stop_id",
    "stop_sequence",
)


@dataclass(frozen=True)
class GeneratedFeed:
    """Filtered, normalised output feed."""

    agency: pd.DataFrame
    routes: pd.DataFrame
    trips: pd.DataFrame
    stops: pd.DataFrame
    calendar: pd.DataFrame
    calendar_dates: pd.DataFrame
    stop_times: pd.DataFrame
    summary: dict[str, Any] = field(default_factory=dict)

    def tables(self) -> dict[str, pd.DataFrame]:
        return {
            "agency": self.agency,
            "routes": self.routes,
            "trips": self.trips,
            "stops": self.stops,
            "calendar": self.calendar,
            "calendar_dates": self.calendar_dates,
            "stop_times": self.stop_times,
        }


def _as_float_or_none(v: Any) -> float | None:
    if v is None or pd.isna(v) or str(v).strip() == "":
        return None
    return float(v)


def _frame(rows: list[dict[str, Any]], schema: TableSchema, sort_by: list[str]) -> pd.DataFrame:
    if not rows:
        return empty_frame(schema)
    df = pd.DataFrame(rows, columns=schema.columns())
    df = df.sort_values(sort_by, kind="mergesort").reset_index(drop=True)
    return validate_df(df, schema, allow_extra_columns=False)


def _agency_frame(policy: AgencyPolicy) -> pd.DataFrame:
    return _frame(
        [
            {
                "agency_name": policy.config.agency_name,
                "agency_color": policy.get_agency_color(),
                "route_type": policy.get_agency_route_type(),
            }
        ],
        OUT_AGENCY,
        ["agency_name"],
    )


def _filter_rows(df: pd.DataFrame, exclude) -> pd.DataFrame:
    """Keep the rows for which `exclude(record)` is false."""
    if df.empty:
        return df.reset_index(drop=True)
    mask = [not exclude(r) for r in df.to_dict("records")]
    return df[mask].reset_index(drop=True)


def build_routes(feed: GtfsFeed, policy: AgencyPolicy) -> tuple[pd.DataFrame, dict[str, int]]:
    """Normalised routes plus the feed route_id -> output route id map."""
    rows: list[dict[str, Any]] = []
    route_ids: dict[str, int] = {}
    for record in feed.routes.to_dict("records"):
        route = Route.from_row(record)
        if policy.exclude_route(route):
            continue
        rid = policy.get_route_id(route)
        route_ids[route.route_id] = rid
        rows.append(
            {
                "route_id": rid,
                "route_short_name": policy.get_route_short_name(route),
                "route_long_name": policy.get_route_long_name(route),
                "route_color": policy.get_route_color(route),
                "route_type": policy.get_agency_route_type(),
            }
        )
    return _frame(rows, OUT_ROUTES, ["route_id"]), route_ids


def build_trips(
    feed: GtfsFeed, policy: AgencyPolicy, route_ids: dict[str, int]
) -> pd.DataFrame:
    """Normalised trips on kept routes.

    Trips with a compass heading keep their own cleaned headsign. Trips without
    one share a headsign per (route, direction_id), merged by the policy.
    """
    rows: list[dict[str, Any]] = []
    for record in feed.trips.to_dict("records"):
        trip = Trip.from_row(record)
        if trip.route_id not in route_ids or policy.exclude_trip(trip):
            continue
        rid = route_ids[trip.route_id]
        direction = policy.get_trip_direction(rid, trip.direction_id)
        rows.append(
            {
                "trip_id": trip.trip_id,
                "route_id": rid,
                "service_id": trip.service_id,
                "direction_id": trip.direction_id,
                "direction": direction.value if direction is not None else "",
                "trip_headsign": policy.clean_trip_headsign(trip.headsign),
            }
        )

    groups: dict[tuple[int, int | None], list[dict[str, Any]]] = defaultdict(list)
    for row in rows:
        if not row["direction"]:
            groups[(row["route_id"], row["direction_id"])].append(row)
    for members in groups.values():
        merged = members[0]["trip_headsign"]
        for row in members[1:]:
            if row["trip_headsign"] != merged:
                merged = policy.merge_trip_headsigns(merged, row["trip_headsign"])
        for row in members:
            row["trip_headsign"] = merged

    return _frame(rows, OUT_TRIPS, ["trip_id"])


def build_stops(
    feed: GtfsFeed, policy: AgencyPolicy, used_stop_ids: set[str]
) -> tuple[pd.DataFrame, dict[str, int]]:
    """Normalised stops referenced by kept stop times, plus the stop id map."""
    rows: list[dict[str, Any]] = []
    stop_ids: dict[str, int] = {}
    for record in feed.stops.to_dict("records"):
        stop = Stop.from_row(record)
        if stop.stop_id not in used_stop_ids:
            continue
        sid = policy.get_stop_id(stop)
        stop_ids[stop.stop_id] = sid
        rows.append(
            {
                "stop_id": sid,
                "stop_name": policy.clean_stop_name(stop.name),
                "stop_code": stop.code,
                "stop_lat": _as_float_or_none(record.get("stop_lat")),
                "stop_lon": _as_float_or_none(record.get("stop_lon")),
            }
        )
    return _frame(rows, OUT_STOPS, ["stop_id"]), stop_ids


def build_stop_times(
    stop_times: pd.DataFrame, stop_ids: dict[str, int]
) -> pd.DataFrame:
    if stop_times.empty:
        return pd.DataFrame(columns=list(STOP_TIMES_OUT_COLUMNS))
    out = stop_times.loc[:, list(STOP_TIMES_OUT_COLUMNS)].copy()
    out["stop_id"] = [stop_ids[s] for s in out["stop_id"]]
    out["stop_sequence"] = [parse_int("stop_sequence", s) for s in out["stop_sequence"]]
    return out.sort_values(["trip_id", "stop_sequence"], kind="mergesort").reset_index(drop=True)


def _empty_feed(policy: AgencyPolicy, summary: dict[str, Any]) -> GeneratedFeed:
    return GeneratedFeed(
        agency=_agency_frame(policy),
        routes=empty_frame(OUT_ROUTES),
        trips=empty_frame(OUT_TRIPS),
        stops=empty_frame(OUT_STOPS),
        calendar=empty_frame(CALENDAR),
        calendar_dates=empty_frame(CALENDAR_DATES),
        stop_times=pd.DataFrame(columns=list(STOP_TIMES_OUT_COLUMNS)),
        summary=summary,
    )


def generate_feed(feed: GtfsFeed, policy: AgencyPolicy) -> GeneratedFeed:
    """Filter and normalise `feed` with `policy`.

    Useful service ids are computed once up front and bound into the policy for
    the calendar, calendar-date and trip decisions.
    """
    started = time.monotonic()
    LOGGER.info("Generating %s data...", policy.config.agency_name)

    useful = compute_useful_service_ids(feed, policy)
    policy = policy.with_service_ids(ServiceIdFilter(useful))
    summary: dict[str, Any] = {"useful_service_ids": len(useful)}

    if policy.excluding_all():
        LOGGER.warning("No useful service ids: excluding the whole feed")
        summary.update({"routes": 0, "trips": 0, "stops": 0, "stop_times": 0, "excluded_all": True})
        return _empty_feed(policy, summary)

    routes, route_ids = build_routes(feed, policy)
    trips = build_trips(feed, policy, route_ids)
    calendar = _filter_rows(
        feed.calendar, lambda r: policy.exclude_calendar(CalendarRow.from_row(r))
    )
    calendar_dates = _filter_rows(
        feed.calendar_dates, lambda r: policy.exclude_calendar_date(CalendarDateRow.from_row(r))
    )

    kept_trip_ids = set(trips["trip_id"].astype(str))
    kept_stop_times = feed.stop_times[feed.stop_times["trip_id"].isin(kept_trip_ids)]
    stops, stop_ids = build_stops(feed, policy, set(kept_stop_times["stop_id"]))
    missing = set(kept_stop_times["stop_id"]) - set(stop_ids)
    if missing:
        raise ValueError(f"{STOP_TIMES.name}: references unknown stop ids: {sorted(missing)[:10]}")
    stop_times = build_stop_times(kept_stop_times, stop_ids)

    summary.update(
        {
            "routes": len(routes),
            "trips": len(trips),
            "stops": len(stops),
            "stop_times": len(stop_times),
            "calendar": len(calendar),
            "calendar_dates": len(calendar_dates),
            "excluded_all": False,
        }
    )
    LOGGER.info(
        "Kept %d routes, %d trips, %d stops, %d stop times",
        summary["routes"],
        summary["trips"],
        summary["stops"],
        summary["stop_times"],
    )
    LOGGER.info(
        "Generating %s data... DONE in %s.",
        policy.config.agency_name,
        pretty_duration(time.monotonic() - started),
    )
    return GeneratedFeed(
        agency=_agency_frame(policy),
        routes=routes,
        trips=trips,
        stops=stops,
        calendar=calendar,
        calendar_dates=calendar_dates,
        stop_times=stop_times,
        summary=summary,
    )
