"""
Project-wide configuration and directory structure.

This module defines the paths and constants used throughout FieldRoot.
Package resources (the built-in word roots) live next to the code; the
user's root library lives in a per-user directory that is only created
when the first custom root is saved.

Module Contents:
    APP_NAME: Application name for display purposes
    DATA_DIR: Directory holding packaged resources
    BASE_ROOTS_FILE: Built-in word roots shipped with the package
    USER_DIR: Directory holding the user's custom root library
    OVERLAY_SLOT: Storage slot name for the custom root library
    SEPARATOR: Separator used when joining English tokens
    MAX_ROOT_LEN: Legacy fixed lookahead bound for segmentation
    CHINESE_HEADERS / ENGLISH_HEADERS: Accepted bulk-import header aliases

The user directory can be relocated with the FIELDROOT_HOME environment
variable.

Example:
    >>> from fieldroot.config import USER_DIR, default_store
    >>> store = default_store()
    >>> print(f"Custom roots stored in: {USER_DIR}")
"""

from __future__ import annotations

import os
from pathlib import Path

# Application name for display and identification
APP_NAME = "FieldRoot"

# Packaged resources
DATA_DIR = Path(__file__).resolve().parent / "data"

# Built-in word roots (headers: 中文,英文)
BASE_ROOTS_FILE = DATA_DIR / "base_roots.csv"

# Per-user directory for the custom root library
USER_DIR = Path(os.getenv("FIELDROOT_HOME", str(Path.home() / ".fieldroot"))).expanduser()

# Storage slot holding the custom root library
OVERLAY_SLOT = "customWordRoots"

# Joins the English tokens of a translated field
SEPARATOR = "_"

# Legacy fixed lookahead. Segmentation derives the bound from the longest
# key unless a caller passes max_root_len explicitly.
MAX_ROOT_LEN = 10

# Bulk-import header aliases, matched by exact trimmed equality
CHINESE_HEADERS = ("中文全称", "中文")
ENGLISH_HEADERS = ("英文缩写", "英文")


def default_store(use_base: bool = True):
    """Build a DictionaryStore over the user's root library on disk.

    Args:
        use_base: Whether to include the built-in word roots

    Returns:
        DictionaryStore backed by JsonFileStorage(USER_DIR)
    """
    from fieldroot.dictionary.base import load_base_roots
    from fieldroot.dictionary.storage import JsonFileStorage
    from fieldroot.dictionary.store import DictionaryStore

    base = load_base_roots() if use_base else {}
    return DictionaryStore(base=base, storage=JsonFileStorage(USER_DIR), slot=OVERLAY_SLOT)
