"""Generate the TransLink ferry (SeaBus) feed from the full TransLink GTFS feed.

Run from repo root:
  python scripts/phases/generate_ferry_data.py --input data/raw/gtfs.zip

Outputs:
- data/processed/feed/{agency,routes,trips,stops,calendar,calendar_dates,stop_times}.txt
- data/processed/_meta/run_summary.json (`<output>/_meta/` when --output is given)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure repo root is on sys.path so `import ferry_gtfs...` works when executing this file directly.
SCRIPTS_DIR = Path(__file__).resolve().parents[1]
if str(SCRIPTS_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPTS_DIR))
from bootstrap import ensure_repo_root_on_path

ensure_repo_root_on_path(__file__)

from ferry_gtfs.core.cli_utils import RunStats, create_base_parser
from ferry_gtfs.core.config import configure_logging, get_paths, load_agency_config
from ferry_gtfs.core.errors import PolicyError
from ferry_gtfs.data_processing.feed_build import generate_feed
from ferry_gtfs.io import read_feed, write_feed, write_run_summary
from ferry_gtfs.policy.seabus import SeaBusPolicy

LOGGER = logging.getLogger("generate_ferry_data")

DEFAULT_INPUT_FILE = "gtfs.zip"


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return create_base_parser(
        "Filter the TransLink GTFS feed down to the SeaBus and normalise its labels."
    ).parse_args(argv)


def run(
    input_path: Path | None = None,
    output_dir: Path | None = None,
    config_path: Path | None = None,
) -> dict[str, object]:
    """Run the ferry feed generation. Returns the run summary."""
    paths = get_paths()
    input_path = paths.data_raw / DEFAULT_INPUT_FILE if input_path is None else Path(input_path)
    if output_dir is None:
        output_dir, meta_dir = paths.output_feed, paths.processed_meta
    else:
        output_dir = Path(output_dir)
        meta_dir = output_dir / "_meta"

    stats = RunStats()
    config = load_agency_config(config_path)
    policy = SeaBusPolicy(config)
    stats.add_step("config")

    feed = read_feed(input_path)
    stats.add_step("read")

    generated = generate_feed(feed, policy)
    stats.update(generated.summary)
    stats.add_step("generate")

    written = write_feed(generated.tables(), output_dir)
    LOGGER.info("Wrote %d tables to %s", len(written), output_dir)
    stats.add_step("write")

    summary = stats.get_summary()
    summary_path = write_run_summary(summary, meta_dir)
    LOGGER.info("Wrote %s", summary_path)
    return summary


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    try:
        run(
            input_path=Path(args.input) if args.input else None,
            output_dir=Path(args.output) if args.output else None,
            config_path=Path(args.config) if args.config else None,
        )
    except PolicyError as e:
        LOGGER.error("Aborting ferry feed generation: %s", e)
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
