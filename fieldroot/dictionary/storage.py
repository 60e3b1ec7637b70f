"""
Durable storage backends for the custom root library.

A backend holds named slots of text. The store keeps the whole overlay
in a single slot and always replaces it as one value, so a reader never
sees a half-written library.

- JsonFileStorage: one ``<slot>.json`` file per slot in a directory
- MemoryStorage: in-process dict, for tests and embedding
"""

from __future__ import annotations

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class SlotStorage(ABC):
    """Abstract key/value storage for serialized slots."""

    @abstractmethod
    def read(self, slot: str) -> Optional[str]:
        """Return the slot content, or None if the slot does not exist."""
        pass

    @abstractmethod
    def write(self, slot: str, data: str) -> None:
        """Replace the slot content as a whole."""
        pass

    @abstractmethod
    def remove(self, slot: str) -> None:
        """Delete the slot; a missing slot is not an error."""
        pass


class JsonFileStorage(SlotStorage):
    """Slots stored as JSON files in a directory.

    Writes go to a temporary file in the same directory which is then
    moved over the target with os.replace, so the previous content stays
    intact if the write fails.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def path_for(self, slot: str) -> Path:
        return self.directory / f"{slot}.json"

    def read(self, slot: str) -> Optional[str]:
        path = self.path_for(slot)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, slot: str, data: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.path_for(slot)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{slot}.", suffix=".tmp", dir=self.directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, target)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug("Wrote %d chars to %s", len(data), target)

    def remove(self, slot: str) -> None:
        path = self.path_for(slot)
        if path.exists():
            path.unlink()
            logger.debug("Removed %s", path)

    def __repr__(self) -> str:
        return f"JsonFileStorage({str(self.directory)!r})"


class MemoryStorage(SlotStorage):
    """Slots kept in a plain dict for the lifetime of the object."""

    def __init__(self, slots: dict[str, str] | None = None):
        self.slots: dict[str, str] = dict(slots or {})

    def read(self, slot: str) -> Optional[str]:
        return self.slots.get(slot)

    def write(self, slot: str, data: str) -> None:
        self.slots[slot] = data

    def remove(self, slot: str) -> None:
        self.slots.pop(slot, None)

    def __repr__(self) -> str:
        return f"MemoryStorage({len(self.slots)} slots)"
