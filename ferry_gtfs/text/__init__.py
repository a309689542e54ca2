from __future__ import annotations

from ferry_gtfs.text.cleaning import (
    clean_bounds,
    clean_label,
    clean_numbers,
    clean_street_types,
    remove_word,
    to_lower,
)

__all__ = [
    "to_lower",
    "remove_word",
    "clean_bounds",
    "clean_street_types",
    "clean_numbers",
    "clean_label",
]
