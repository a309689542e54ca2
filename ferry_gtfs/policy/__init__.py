"""Agency policies: per-row filtering and normalisation hooks."""

from __future__ import annotations

from ferry_gtfs.policy.base import AgencyPolicy, parse_int
from ferry_gtfs.policy.seabus import SeaBusPolicy
from ferry_gtfs.policy.service_ids import (
    NO_RESTRICTION,
    ServiceIdFilter,
    compute_useful_service_ids,
)

__all__ = [
    "AgencyPolicy",
    "SeaBusPolicy",
    "ServiceIdFilter",
    "NO_RESTRICTION",
    "compute_useful_service_ids",
    "parse_int",
]
