"""Default feed-generation hooks an agency policy overrides.

The base class answers every hook the way a generic GTFS pipeline would:
keep everything the service-id filter allows, pass feed ids and names through,
and apply only the final label cleanup to text.
"""

from __future__ import annotations

import copy
from typing import Any

from ferry_gtfs.core.config import AgencyConfig
from ferry_gtfs.core.errors import MalformedFieldError, UnsupportedEntityError
from ferry_gtfs.models.entities import (
    CalendarDateRow,
    CalendarRow,
    Direction,
    Route,
    Stop,
    Trip,
)
from ferry_gtfs.policy.service_ids import NO_RESTRICTION, ServiceIdFilter
from ferry_gtfs.text.cleaning import clean_label


def parse_int(field: str, value: Any) -> int:
    """Parse a non-negative decimal feed id, raising `MalformedFieldError` otherwise."""
    s = "" if value is None else str(value).strip()
    if not (s.isascii() and s.isdigit()):
        raise MalformedFieldError(field, value)
    return int(s)


class AgencyPolicy:
    """Generic per-row hooks. Subclass to encode one agency's policy."""

    def __init__(
        self,
        config: AgencyConfig | None = None,
        service_ids: ServiceIdFilter = NO_RESTRICTION,
    ) -> None:
        self.config = config or AgencyConfig()
        self.service_ids = service_ids

    def with_service_ids(self, service_ids: ServiceIdFilter) -> AgencyPolicy:
        """Return a copy of this policy bound to `service_ids`."""
        other = copy.copy(self)
        other.service_ids = service_ids
        return other

    # Filtering

    def excluding_all(self) -> bool:
        return self.service_ids.excludes_all

    def exclude_calendar(self, row: CalendarRow) -> bool:
        return self.service_ids.excludes(row.service_id)

    def exclude_calendar_date(self, row: CalendarDateRow) -> bool:
        return self.service_ids.excludes(row.service_id)

    def exclude_route(self, route: Route) -> bool:
        return False

    def exclude_trip(self, trip: Trip) -> bool:
        return self.service_ids.excludes(trip.service_id)

    # Routes

    def get_route_id(self, route: Route) -> int:
        return parse_int("route_id", route.route_id)

    def get_route_short_name(self, route: Route) -> str:
        return route.short_name

    def get_route_long_name(self, route: Route) -> str:
        return route.long_name

    def get_agency_color(self) -> str:
        return self.config.agency_color

    def get_route_color(self, route: Route) -> str:
        return self.get_agency_color()

    def get_agency_route_type(self) -> int:
        return self.config.route_type

    # Trips

    def get_trip_direction(self, route_id: int, direction_id: int | None) -> Direction | None:
        """Compass heading for a trip; `None` keeps the feed headsign."""
        return None

    def merge_trip_headsigns(self, headsign: str, other: str) -> str:
        if headsign == other:
            return headsign
        raise UnsupportedEntityError("merge_trip_headsigns", (headsign, other))

    def clean_trip_headsign(self, headsign: str) -> str:
        return clean_label(headsign)

    # Stops

    def clean_stop_name(self, name: str) -> str:
        return clean_label(name)

    def get_stop_id(self, stop: Stop) -> int:
        return parse_int("stop_id", stop.stop_id)
