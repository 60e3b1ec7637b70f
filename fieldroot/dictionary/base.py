"""
Built-in word roots.

The base layer ships with the package as ``data/base_roots.csv`` and is
read once per process. It is never modified at runtime; user changes go
to the overlay kept by DictionaryStore.
"""

from __future__ import annotations

import csv
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from fieldroot.config import BASE_ROOTS_FILE


def load_roots_csv(path: str | Path, has_header: bool = True) -> dict[str, str]:
    """Load ``chinese,english`` pairs from a CSV file.

    Rows with fewer than two cells or a blank cell are skipped; a later
    row wins over an earlier one with the same key.
    """
    path = Path(path)
    roots: dict[str, str] = {}

    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f)
        if has_header:
            next(reader, None)

        for row in reader:
            if len(row) < 2:
                continue
            chinese = row[0].strip()
            english = row[1].strip()
            if not chinese or not english:
                continue
            roots[chinese] = english

    return roots


@lru_cache(maxsize=None)
def _load_cached(path: str) -> Mapping[str, str]:
    return MappingProxyType(load_roots_csv(path))


def load_base_roots(path: str | Path | None = None) -> Mapping[str, str]:
    """Return the built-in roots as a read-only mapping.

    Args:
        path: Alternative resource file (defaults to BASE_ROOTS_FILE)
    """
    return _load_cached(str(Path(path or BASE_ROOTS_FILE).resolve()))
