"""TransLink ferry policy: keep the SeaBus crossing, drop every other route.

The feed is treated as a closed world. Any naming, colour, id or direction
request for something other than the SeaBus raises `UnsupportedEntityError`
instead of returning a guessed value.
"""

from __future__ import annotations

from ferry_gtfs.core.errors import UnsupportedEntityError
from ferry_gtfs.models.entities import Direction, Route, Stop
from ferry_gtfs.policy.base import AgencyPolicy, parse_int
from ferry_gtfs.text.cleaning import (
    clean_bounds,
    clean_label,
    clean_numbers,
    clean_street_types,
    remove_word,
    to_lower,
)

# GTFS direction_id -> heading
DIRECTIONS: dict[int, Direction] = {
    0: Direction.NORTH,
    1: Direction.SOUTH,
}


class SeaBusPolicy(AgencyPolicy):
    def is_seabus_route(self, route: Route) -> bool:
        tokens = {t.strip().lower() for t in self.config.route_tokens}
        return (
            route.short_name.strip().lower() in tokens
            or route.long_name.strip().lower() in tokens
        )

    def _require_seabus(self, hook: str, route: Route) -> None:
        if not self.is_seabus_route(route):
            raise UnsupportedEntityError(hook, route)

    def exclude_route(self, route: Route) -> bool:
        return not self.is_seabus_route(route)

    def get_route_id(self, route: Route) -> int:
        if self.config.route_id_policy == "fixed":
            self._require_seabus("get_route_id", route)
            return self.config.fixed_route_id
        # feed route id, used as the GTFS real-time matching key
        return super().get_route_id(route)

    def get_route_short_name(self, route: Route) -> str:
        self._require_seabus("get_route_short_name", route)
        return self.config.short_name

    def get_route_long_name(self, route: Route) -> str:
        self._require_seabus("get_route_long_name", route)
        return self.config.long_name

    def get_route_color(self, route: Route) -> str:
        self._require_seabus("get_route_color", route)
        return self.config.route_color

    def get_trip_direction(self, route_id: int, direction_id: int | None) -> Direction:
        if route_id != self.config.known_route_id:
            raise UnsupportedEntityError(
                "get_trip_direction", route_id, f"expected route {self.config.known_route_id}"
            )
        direction = DIRECTIONS.get(direction_id)
        if direction is None:
            raise UnsupportedEntityError(
                "get_trip_direction", direction_id, f"route {route_id} direction_id"
            )
        return direction

    def merge_trip_headsigns(self, headsign: str, other: str) -> str:
        # One route, two fixed headings: there is never anything to merge.
        raise UnsupportedEntityError("merge_trip_headsigns", (headsign, other))

    def clean_trip_headsign(self, headsign: str) -> str:
        headsign = remove_word(headsign, self.config.route_keyword)
        headsign = clean_bounds(headsign)
        headsign = clean_street_types(headsign)
        return clean_label(headsign)

    def clean_stop_name(self, name: str) -> str:
        name = to_lower(name)
        name = remove_word(name, self.config.route_keyword)
        name = clean_bounds(name)
        name = clean_street_types(name)
        name = clean_numbers(name)
        return clean_label(name)

    def get_stop_id(self, stop: Stop) -> int:
        if self.config.stop_id_policy == "default":
            return super().get_stop_id(stop)
        code = stop.code.strip()
        if code and code.isascii() and code.isdigit():
            return int(code)
        return self.config.stop_id_offset + parse_int("stop_id", stop.stop_id)
