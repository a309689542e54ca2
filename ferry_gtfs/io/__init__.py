"""Lightweight I/O helpers.

This module centralises:
- validated GTFS table reads (`read_feed`) from a zip archive or a directory
- generated feed writes (`write_feed`)
- simple JSON helpers and the run summary written next to the feed
"""

from __future__ import annotations

import json
import logging
import zipfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

from ferry_gtfs.models.schemas import INPUT_TABLES, OPTIONAL_TABLES, TableSchema
from ferry_gtfs.models.validate import empty_frame, validate_df

LOGGER = logging.getLogger(__name__)

ENCODING = "utf-8-sig"


@dataclass(frozen=True)
class GtfsFeed:
    """Parsed source feed; every column is a pandas `string` column."""

    routes: pd.DataFrame
    trips: pd.DataFrame
    stops: pd.DataFrame
    calendar: pd.DataFrame
    calendar_dates: pd.DataFrame
    stop_times: pd.DataFrame

    def tables(self) -> dict[str, pd.DataFrame]:
        return {
            "routes": self.routes,
            "trips": self.trips,
            "stops": self.stops,
            "calendar": self.calendar,
            "calendar_dates": self.calendar_dates,
            "stop_times": self.stop_times,
        }


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def write_json(obj: Any, path: Path) -> None:
    ensure_parent_dir(path)
    path.write_text(json.dumps(obj, ensure_ascii=False, indent=2), encoding="utf-8")


def _read_table(path: Path, schema: TableSchema, zf: zipfile.ZipFile | None) -> pd.DataFrame | None:
    """Read one GTFS table as strings; returns None when the file is absent."""
    read_kwargs: dict[str, Any] = {"dtype": str, "keep_default_na": False, "encoding": ENCODING}
    if zf is not None:
        members = [n for n in zf.namelist() if Path(n).name == schema.filename]
        if not members:
            return None
        with zf.open(members[0]) as f:
            df = pd.read_csv(f, **read_kwargs)
    else:
        p = path / schema.filename
        if not p.exists():
            return None
        df = pd.read_csv(p, **read_kwargs)
    df.columns = [str(c).strip() for c in df.columns]
    return validate_df(df, schema)


def read_feed(path: Path) -> GtfsFeed:
    """Read and validate a GTFS feed from a `.zip` archive or an extracted directory.

    `calendar`, `calendar_dates` and `stop_times` may be absent and come back empty;
    any other missing table raises `FileNotFoundError`.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing GTFS feed: {path}")

    zf = zipfile.ZipFile(path) if path.is_file() else None
    try:
        tables: dict[str, pd.DataFrame] = {}
        for schema in INPUT_TABLES:
            df = _read_table(path, schema, zf)
            if df is None:
                if schema.name not in OPTIONAL_TABLES:
                    raise FileNotFoundError(f"{path}: missing required table {schema.filename}")
                LOGGER.info("No %s in %s, using an empty table", schema.filename, path)
                df = empty_frame(schema)
            tables[schema.name] = df
    finally:
        if zf is not None:
            zf.close()

    LOGGER.info(
        "Read feed %s: %s",
        path,
        ", ".join(f"{name}={len(df)}" for name, df in tables.items()),
    )
    return GtfsFeed(**tables)


def write_feed(tables: Mapping[str, pd.DataFrame], out_dir: Path) -> list[Path]:
    """Write each table to `<out_dir>/<name>.txt` (UTF-8 CSV). Returns written paths."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name, df in tables.items():
        out_path = out_dir / f"{name}.txt"
        df.to_csv(out_path, index=False, encoding="utf-8")
        written.append(out_path)
    return written


def write_run_summary(summary: Mapping[str, Any], meta_dir: Path) -> Path:
    """Write the run summary JSON (`<meta_dir>/run_summary.json`)."""
    out_path = Path(meta_dir) / "run_summary.json"
    write_json(dict(summary), out_path)
    return out_path
