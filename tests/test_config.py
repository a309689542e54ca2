from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from ferry_gtfs.core.config import AgencyConfig, get_paths, load_agency_config

REPO_CONFIG = Path(__file__).resolve().parents[1] / "config" / "agency_config.yaml"


def test_defaults_describe_the_seabus():
    cfg = AgencyConfig()
    assert cfg.short_name == "SB"
    assert cfg.long_name == "SeaBus"
    assert cfg.route_id_policy == "default"
    assert cfg.known_route_id == 6771
    assert AgencyConfig(route_id_policy="fixed").known_route_id == 998


def test_repo_config_matches_defaults():
    assert load_agency_config(REPO_CONFIG) == AgencyConfig()


def test_load_overrides(tmp_path):
    path = tmp_path / "agency.yaml"
    path.write_text(
        "agency:\n  route_id_policy: fixed\n  route_tokens: ['998', 'SEABUS']\n",
        encoding="utf-8",
    )
    cfg = load_agency_config(path)
    assert cfg.route_id_policy == "fixed"
    assert cfg.route_tokens == ("998", "SEABUS")
    assert cfg.route_color == "82695E"


def test_invalid_values_rejected(tmp_path):
    path = tmp_path / "agency.yaml"
    path.write_text("agency:\n  route_color: brown\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_agency_config(path)

    with pytest.raises(ValidationError):
        AgencyConfig(route_id_policy="guess")


def test_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_agency_config(tmp_path / "missing.yaml")


def test_paths(tmp_path):
    paths = get_paths(tmp_path)
    assert paths.output_feed == tmp_path.resolve() / "data" / "processed" / "feed"
    assert paths.processed_meta.parent == paths.output_feed.parent
