"""
FieldRoot: Chinese field-name to English identifier translation by word roots.

Field names such as 交易日期 are split into known word roots with a
greedy longest-match segmenter and the roots' English tokens are joined
into an identifier (trade_date). The root dictionary combines built-in
roots with a user-maintained library that persists between runs.

Core pieces:
1. Segmentation engine (fieldroot.segmenter)
2. Dictionary store and mutations (fieldroot.dictionary)
3. Batch translation (fieldroot.pipeline)

License: MIT
"""

__version__ = "0.1.0"

from fieldroot.models import Segment, TranslationRow, WordRoot, ImportRow, ImportAction, RootDictionary
from fieldroot.errors import FieldRootError, ValidationError, FormatError
from fieldroot.segmenter import segment, join_segments
from fieldroot.dictionary.store import DictionaryStore
from fieldroot.pipeline import TranslationSession, translate_rows, translate_text

__all__ = [
    "Segment",
    "TranslationRow",
    "WordRoot",
    "ImportRow",
    "ImportAction",
    "RootDictionary",
    "FieldRootError",
    "ValidationError",
    "FormatError",
    "segment",
    "join_segments",
    "DictionaryStore",
    "TranslationSession",
    "translate_rows",
    "translate_text",
]
