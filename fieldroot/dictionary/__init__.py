"""
Word-root dictionary: built-in roots, the user's overlay, and its storage.
"""

from fieldroot.dictionary.base import load_base_roots, load_roots_csv
from fieldroot.dictionary.importer import preview_import, preview_import_file
from fieldroot.dictionary.storage import JsonFileStorage, MemoryStorage, SlotStorage
from fieldroot.dictionary.store import DictionaryStore

__all__ = [
    "DictionaryStore",
    "JsonFileStorage",
    "MemoryStorage",
    "SlotStorage",
    "load_base_roots",
    "load_roots_csv",
    "preview_import",
    "preview_import_file",
]
