"""Common CLI utilities for feed generation scripts."""

from __future__ import annotations

import argparse
import time
from typing import Any


def create_base_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--input",
        default=None,
        help="Source GTFS feed (zip archive or extracted directory). Default: data/raw/gtfs.zip",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Output directory for the generated feed. Default: data/processed/feed",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Agency policy YAML. Default: config/agency_config.yaml",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def pretty_duration(seconds: float) -> str:
    """Human-readable duration, e.g. `1m 05s` or `850 ms`."""
    if seconds < 1:
        return f"{int(seconds * 1000)} ms"
    minutes, secs = divmod(int(round(seconds)), 60)
    if minutes:
        return f"{minutes}m {secs:02d}s"
    return f"{secs}s"


class RunStats:
    """Simple container for collecting statistics across pipeline steps."""

    def __init__(self) -> None:
        self.stats: dict[str, Any] = {}
        self.completed_steps: list[str] = []
        self._started = time.monotonic()

    def update(self, step_stats: dict[str, Any]) -> None:
        self.stats.update(step_stats)

    def add_step(self, step_name: str) -> None:
        self.completed_steps.append(step_name)

    def elapsed(self) -> float:
        return time.monotonic() - self._started

    def get_summary(self) -> dict[str, Any]:
        return {
            "completed_steps": self.completed_steps,
            "step_count": len(self.completed_steps),
            "elapsed_s": round(self.elapsed(), 3),
            **self.stats,
        }
