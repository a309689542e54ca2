"""Useful service ids: the services referenced by at least one kept trip."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ferry_gtfs.models.entities import Route, Trip

if TYPE_CHECKING:
    from ferry_gtfs.io import GtfsFeed
    from ferry_gtfs.policy.base import AgencyPolicy

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceIdFilter:
    """Read-only service-id restriction for one run.

    `service_ids=None` means no restriction (keep every service); an empty set
    excludes the whole feed.
    """

    service_ids: frozenset[str] | None = None

    @property
    def restricts(self) -> bool:
        return self.service_ids is not None

    @property
    def excludes_all(self) -> bool:
        return self.service_ids is not None and not self.service_ids

    def excludes(self, service_id: str) -> bool:
        return self.service_ids is not None and service_id not in self.service_ids


NO_RESTRICTION = ServiceIdFilter()


def compute_useful_service_ids(feed: GtfsFeed, policy: AgencyPolicy) -> frozenset[str]:
    """Return the service ids of every trip the policy keeps on a kept route.

    Trip-level checks run without any service restriction, since usefulness is
    exactly what is being computed here.
    """
    unrestricted = policy.with_service_ids(NO_RESTRICTION)

    kept_routes: set[str] = set()
    for row in feed.routes.to_dict("records"):
        route = Route.from_row(row)
        if not unrestricted.exclude_route(route):
            kept_routes.add(route.route_id)

    useful: set[str] = set()
    for row in feed.trips.to_dict("records"):
        trip = Trip.from_row(row)
        if trip.route_id not in kept_routes:
            continue
        if unrestricted.exclude_trip(trip):
            continue
        useful.add(trip.service_id)

    LOGGER.info(
        "Useful service ids: %d (routes kept: %d of %d)",
        len(useful),
        len(kept_routes),
        len(feed.routes),
    )
    return frozenset(useful)
