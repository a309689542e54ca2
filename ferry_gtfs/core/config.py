"""Project configuration (paths, agency policy settings, logging)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

# GTFS route_type for ferries
ROUTE_TYPE_FERRY: int = 4

DEFAULT_CONFIG_FILE = "agency_config.yaml"


def project_root() -> Path:
    """Return repository root assuming this file lives in `<root>/ferry_gtfs/core/config.py`."""
    return Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Paths:
    root: Path
    config: Path
    data_raw: Path
    data_processed: Path

    # Generated feed and run metadata
    output_feed: Path
    processed_meta: Path

    src: Path
    scripts: Path
    tests: Path


def get_paths(root: Path | None = None) -> Paths:
    r = project_root() if root is None else Path(root).resolve()
    data_processed = r / "data" / "processed"
    return Paths(
        root=r,
        config=r / "config",
        data_raw=r / "data" / "raw",
        data_processed=data_processed,
        output_feed=data_processed / "feed",
        processed_meta=data_processed / "_meta",
        src=r / "ferry_gtfs",
        scripts=r / "scripts",
        tests=r / "tests",
    )


class AgencyConfig(BaseModel):
    """Per-agency policy settings.

    Defaults reproduce the TransLink SeaBus policy, so a YAML file is optional.
    """

    agency_name: str = "TransLink ferry"
    # Route short/long names (case-insensitive) identifying the SeaBus family
    route_tokens: tuple[str, ...] = ("998", "SeaBus")
    # "default" keeps the feed route id (matches GTFS real-time), "fixed" uses fixed_route_id
    route_id_policy: Literal["default", "fixed"] = "default"
    fixed_route_id: int = 998
    feed_route_id: int = 6771
    short_name: str = "SB"
    long_name: str = "SeaBus"
    agency_color: str = Field(default="0761A5", pattern=r"^[0-9A-Fa-f]{6}$")
    route_color: str = Field(default="82695E", pattern=r"^[0-9A-Fa-f]{6}$")
    route_keyword: str = "seabus"
    stop_id_policy: Literal["stop_code", "default"] = "stop_code"
    stop_id_offset: int = 1_000_000
    route_type: int = ROUTE_TYPE_FERRY

    @property
    def known_route_id(self) -> int:
        """Route id the SeaBus family ends up with under the active route id policy."""
        return self.fixed_route_id if self.route_id_policy == "fixed" else self.feed_route_id


def load_agency_config(path: Path | None = None) -> AgencyConfig:
    """Load the agency YAML config (default: `<root>/config/agency_config.yaml`)."""
    p = get_paths().config / DEFAULT_CONFIG_FILE if path is None else Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Missing agency config: {p}")
    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    return AgencyConfig.model_validate(raw.get("agency", raw))


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
