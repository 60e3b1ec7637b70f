"""
Two-layer word-root dictionary with a persisted user overlay.

The effective dictionary is the built-in base layer overridden by the
user's overlay: on a key present in both, the overlay wins. Only the
overlay is ever mutated. It is read lazily from a storage slot the
first time it is needed, then kept in memory and written back in full
after every mutation.

A corrupt or unreadable slot is treated as an empty overlay so the
engine stays usable with its built-in roots.

Example:
    >>> store = DictionaryStore(base={"交易": "trade"}, storage=MemoryStorage())
    >>> store.add("交易", "deal")
    >>> store.effective_dictionary()["交易"]
    'deal'
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Optional

from fieldroot.config import CHINESE_HEADERS, ENGLISH_HEADERS, OVERLAY_SLOT
from fieldroot.dictionary import mutations
from fieldroot.dictionary.importer import preview_import
from fieldroot.dictionary.storage import MemoryStorage, SlotStorage
from fieldroot.errors import StorageReadError
from fieldroot.models import ImportRow, RootDictionary, WordRoot

logger = logging.getLogger(__name__)


def decode_overlay(raw: str) -> dict[str, str]:
    """Decode a serialized overlay.

    Entries whose key or value is blank after trimming are dropped; such
    a root could never have been saved through add/edit/import.

    Raises:
        StorageReadError: If ``raw`` is not a flat JSON object of strings
    """
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise StorageReadError(f"overlay is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise StorageReadError(f"overlay must be an object, got {type(data).__name__}")

    overlay = {}
    for key, value in data.items():
        if not isinstance(value, str):
            raise StorageReadError(f"overlay value for {key!r} is not a string")
        if not key.strip() or not value.strip():
            logger.warning("Dropping blank root %r -> %r from stored library", key, value)
            continue
        overlay[key] = value
    return overlay


def encode_overlay(overlay: Mapping[str, str]) -> str:
    return json.dumps(dict(overlay), ensure_ascii=False, indent=2)


class DictionaryStore:
    """Base roots plus a persisted, user-editable overlay.

    Mutations are read-modify-write on the overlay without locking; a
    single writer at a time is assumed.
    """

    def __init__(
        self,
        base: Mapping[str, str] | None = None,
        storage: SlotStorage | None = None,
        slot: str = OVERLAY_SLOT,
    ):
        self.base: Mapping[str, str] = base if base is not None else {}
        self.storage = storage if storage is not None else MemoryStorage()
        self.slot = slot
        self._overlay: Optional[dict[str, str]] = None

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load_overlay(self) -> dict[str, str]:
        """Read the persisted overlay; any failure yields an empty overlay."""
        try:
            raw = self.storage.read(self.slot)
            if raw is None:
                return {}
            return decode_overlay(raw)
        except (StorageReadError, OSError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable root library in %r: %s", self.storage, e)
            return {}

    def save_overlay(self, overlay: Mapping[str, str]) -> None:
        """Persist ``overlay`` as a whole and make it the current overlay."""
        self.storage.write(self.slot, encode_overlay(overlay))
        self._overlay = dict(overlay)

    @property
    def overlay(self) -> dict[str, str]:
        """Current overlay (a copy), loaded from storage on first access."""
        if self._overlay is None:
            self._overlay = self.load_overlay()
            logger.debug("Loaded %d custom roots", len(self._overlay))
        return dict(self._overlay)

    def reload(self) -> None:
        """Drop the in-memory overlay so the next read hits storage."""
        self._overlay = None

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def effective_dictionary(self) -> RootDictionary:
        """Base merged with overlay (overlay wins on conflicts)."""
        merged = dict(self.base)
        merged.update(self.overlay)
        return RootDictionary(merged)

    def search(self, term: str = "") -> list[WordRoot]:
        """Custom roots whose Chinese or English contains ``term``."""
        term = term or ""
        return [
            WordRoot(chinese, english)
            for chinese, english in self.overlay.items()
            if term in chinese or term in english
        ]

    def get(self, chinese: str) -> str | None:
        return self.effective_dictionary().get(chinese)

    @property
    def count(self) -> int:
        return len(self.overlay)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, chinese: object) -> bool:
        return chinese in self.overlay

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, chinese: str, english: str) -> None:
        """Add or overwrite a custom root."""
        self.save_overlay(mutations.add_root(self.overlay, chinese, english))
        logger.info("Saved root %s -> %s", chinese.strip(), english.strip())

    def edit(self, old_chinese: str, new_chinese: str, new_english: str) -> None:
        """Rename and/or retranslate a custom root."""
        self.save_overlay(mutations.edit_root(self.overlay, old_chinese, new_chinese, new_english))
        logger.info("Edited root %s -> %s (%s)", old_chinese, new_chinese.strip(), new_english.strip())

    def delete(self, chinese: str) -> bool:
        """Remove a custom root.

        Returns:
            True if the key existed
        """
        overlay = self.overlay
        if chinese not in overlay:
            return False
        self.save_overlay(mutations.delete_root(overlay, chinese))
        logger.info("Deleted root %s", chinese)
        return True

    def clear_all(self) -> None:
        """Remove every custom root. Built-in roots are unaffected."""
        self.storage.remove(self.slot)
        self._overlay = {}
        logger.info("Cleared custom root library")

    def import_preview(
        self,
        raw_table: str,
        chinese_columns: Sequence[str] = CHINESE_HEADERS,
        english_columns: Sequence[str] = ENGLISH_HEADERS,
    ) -> list[ImportRow]:
        """Classify the rows of a CSV table against the current dictionary."""
        return preview_import(
            raw_table,
            self.effective_dictionary(),
            chinese_columns=chinese_columns,
            english_columns=english_columns,
        )

    def import_commit(self, rows: Iterable[ImportRow | tuple[str, str]]) -> int:
        """Apply previewed rows in order and persist once.

        Returns:
            Number of rows applied
        """
        pairs = [
            (row.chinese, row.english) if isinstance(row, ImportRow) else tuple(row)
            for row in rows
        ]
        self.save_overlay(mutations.apply_import(self.overlay, pairs))
        logger.info("Imported %d roots", len(pairs))
        return len(pairs)

    def __repr__(self) -> str:
        loaded = "not loaded" if self._overlay is None else f"{len(self._overlay)} custom"
        return f"DictionaryStore({len(self.base)} base, {loaded}, storage={self.storage!r})"
