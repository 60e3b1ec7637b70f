"""
Greedy longest-match segmentation of field names against word roots.

At each position the longest dictionary key starting there is taken;
when no key starts there, the single character is emitted as unknown.
Every input character ends up in exactly one segment.

The engine is a pure function of its arguments: callers pass the
dictionary snapshot explicitly (usually DictionaryStore.effective_dictionary()).

Example:
    >>> segs = segment("交易日期", {"交易": "trade", "日期": "date"})
    >>> join_segments(segs)
    'trade_date'
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from fieldroot.config import SEPARATOR
from fieldroot.models import RootDictionary, Segment


def lookahead_for(dictionary: Mapping[str, str]) -> int:
    """Longest key length in ``dictionary`` (0 when empty)."""
    if isinstance(dictionary, RootDictionary):
        return dictionary.max_key_length
    return max((len(k) for k in dictionary), default=0)


def segment(
    text: str,
    dictionary: Mapping[str, str],
    max_root_len: int | None = None,
) -> list[Segment]:
    """Split ``text`` into matched roots and unmatched characters.

    Args:
        text: Input text, possibly empty
        dictionary: Chinese -> English mapping to match against
        max_root_len: Fixed lookahead bound; derived from the longest
            dictionary key when omitted

    Returns:
        Segments in input order
    """
    limit = lookahead_for(dictionary) if max_root_len is None else max_root_len
    segments: list[Segment] = []
    i = 0
    n = len(text)

    while i < n:
        for length in range(min(limit, n - i), 0, -1):
            candidate = text[i:i + length]
            english = dictionary.get(candidate)
            if english is not None:
                segments.append(Segment.match(candidate, english))
                i += length
                break
        else:
            segments.append(Segment.unknown(text[i]))
            i += 1

    return segments


def join_segments(segments: Iterable[Segment], separator: str = SEPARATOR) -> str:
    """Join English tokens; unmatched characters contribute an empty token."""
    return separator.join(seg.english for seg in segments)


def unknown_characters(segments: Iterable[Segment]) -> list[str]:
    """Unmatched characters, deduplicated in order of first appearance."""
    seen: dict[str, None] = {}
    for seg in segments:
        if seg.is_unknown and not seg.text.isspace():
            seen.setdefault(seg.text, None)
    return list(seen)
