"""
Batch translation of field names.

This module turns rows of Chinese field names into English identifiers:
1. Segment each row against the effective dictionary
2. Join the English tokens with the separator

``translate_rows`` is the stateless building block. TranslationSession
keeps a list of rows next to a DictionaryStore and re-translates every
row after each dictionary change, so fields that previously had unknown
characters pick up newly added roots.

Example:
    >>> store = DictionaryStore(base={"交易": "trade", "日期": "date"})
    >>> session = TranslationSession(store)
    >>> session.load_text("交易日期\\n交易时间")
    >>> [row.english for row in session.translate()]
    ['trade_date', 'trade__']
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from fieldroot.config import SEPARATOR
from fieldroot.dictionary.store import DictionaryStore
from fieldroot.models import ImportRow, TranslationRow
from fieldroot.segmenter import join_segments, segment

logger = logging.getLogger(__name__)


def translate_text(text: str, dictionary: Mapping[str, str], separator: str = SEPARATOR) -> str:
    """Translate a single field name."""
    return join_segments(segment(text, dictionary), separator)


def translate_rows(
    rows: Iterable[TranslationRow],
    dictionary: Mapping[str, str],
    separator: str = SEPARATOR,
) -> list[TranslationRow]:
    """Recompute ``english`` for every row with a non-blank ``chinese``.

    Blank rows are passed through unchanged. The input rows are not
    modified; new rows are returned.
    """
    translated = []
    for row in rows:
        if row.is_blank:
            translated.append(row)
        else:
            translated.append(TranslationRow(row.chinese, translate_text(row.chinese, dictionary, separator)))
    return translated


def rows_from_text(text: str) -> list[TranslationRow]:
    """One row per non-empty line of ``text``, lines trimmed."""
    lines = (line.strip() for line in (text or "").splitlines())
    return [TranslationRow(line) for line in lines if line]


class TranslationSession:
    """Rows of field names bound to a dictionary store.

    Every dictionary mutation made through the session is followed by a
    re-translation of all rows.

    Usage:
        session = TranslationSession(default_store())
        session.load_text("交易日期\\n存款金额")
        session.translate()
        session.add_root("存款", "deposit")  # rows are re-translated
    """

    def __init__(self, store: DictionaryStore, separator: str = SEPARATOR):
        self.store = store
        self.separator = separator
        self.rows: list[TranslationRow] = []

    # Rows

    def load_text(self, text: str) -> None:
        """Replace the rows with the non-empty lines of ``text``."""
        self.rows = rows_from_text(text)

    def add_row(self, chinese: str = "") -> None:
        self.rows.append(TranslationRow(chinese))

    def edit_row(self, index: int, chinese: str) -> None:
        """Change a row's text; its English becomes stale until translated."""
        self._check_index(index)
        self.rows[index] = TranslationRow(chinese)

    def delete_row(self, index: int) -> None:
        self._check_index(index)
        del self.rows[index]

    def reset(self) -> None:
        self.rows = []

    def translate(self) -> list[TranslationRow]:
        """Translate all rows against the current effective dictionary."""
        self.rows = translate_rows(self.rows, self.store.effective_dictionary(), self.separator)
        return list(self.rows)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.rows):
            raise IndexError(f"row {index} out of range (0-{len(self.rows) - 1})")

    # Dictionary changes, each followed by a re-translation

    def add_root(self, chinese: str, english: str) -> list[TranslationRow]:
        self.store.add(chinese, english)
        return self.translate()

    def edit_root(self, old_chinese: str, new_chinese: str, new_english: str) -> list[TranslationRow]:
        self.store.edit(old_chinese, new_chinese, new_english)
        return self.translate()

    def delete_root(self, chinese: str) -> list[TranslationRow]:
        self.store.delete(chinese)
        return self.translate()

    def clear_roots(self) -> list[TranslationRow]:
        self.store.clear_all()
        return self.translate()

    def commit_import(self, preview: Sequence[ImportRow]) -> list[TranslationRow]:
        self.store.import_commit(preview)
        logger.debug("Re-translating %d rows after import", len(self.rows))
        return self.translate()
