"""
Core data models for FieldRoot.

Defines the small value types that flow between the dictionary store,
the segmentation engine and the translation orchestrator:

- WordRoot: one Chinese phrase -> English token pair
- Segment: one matched phrase or one unmatched character
- TranslationRow: an input field name and its derived identifier
- ImportRow: one previewed row of a bulk import
- RootDictionary: read-only snapshot of the effective dictionary
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class WordRoot:
    """A Chinese phrase mapped to a canonical English token.

    Attributes:
        chinese: The phrase, used as the dictionary key
        english: Its English token
    """
    chinese: str
    english: str


@dataclass(frozen=True)
class Segment:
    """A run of input characters produced by the segmenter.

    A matched segment covers a whole dictionary key; an unmatched one
    covers exactly one character and has an empty English token.
    """
    text: str
    english: str = ""
    matched: bool = False

    @classmethod
    def match(cls, text: str, english: str) -> Segment:
        return cls(text=text, english=english, matched=True)

    @classmethod
    def unknown(cls, char: str) -> Segment:
        return cls(text=char, english="", matched=False)

    @property
    def is_unknown(self) -> bool:
        return not self.matched


@dataclass(frozen=True)
class TranslationRow:
    """One input line and its derived English identifier.

    ``english`` is empty until the row has been translated, and becomes
    stale again whenever ``chinese`` is edited.
    """
    chinese: str
    english: str = ""

    @property
    def is_blank(self) -> bool:
        return not self.chinese.strip()


class ImportAction(str, Enum):
    """Effect a previewed import row will have on the dictionary."""
    ADD = "add"
    UPDATE = "update"

    @property
    def label(self) -> str:
        return "新增" if self is ImportAction.ADD else "更新"


@dataclass(frozen=True)
class ImportRow:
    """A row of a bulk-import preview."""
    chinese: str
    english: str
    action: ImportAction


class RootDictionary(Mapping):
    """Read-only snapshot of the effective dictionary.

    The longest key length is computed once when the snapshot is built
    so the segmenter can bound its lookahead without scanning the keys
    on every call.
    """

    def __init__(self, entries: Mapping[str, str] | None = None):
        self._entries: dict[str, str] = dict(entries or {})
        self._max_key_length = max((len(k) for k in self._entries), default=0)

    @property
    def max_key_length(self) -> int:
        return self._max_key_length

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RootDictionary({len(self._entries)} roots, max_key_length={self._max_key_length})"

    def roots(self) -> list[WordRoot]:
        """Entries as WordRoot objects, in insertion order."""
        return [WordRoot(chinese, english) for chinese, english in self._entries.items()]
