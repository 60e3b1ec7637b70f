"""
Pure transformations of the custom root library.

Each function takes the current overlay and returns a new dict; nothing
here touches storage. DictionaryStore applies one of these and then
persists the result, so the validation rules live in a single place.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from fieldroot.errors import ValidationError


def _require(field: str, value: str | None) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationError(field)
    return value


def add_root(overlay: Mapping[str, str], chinese: str, english: str) -> dict[str, str]:
    """Add or overwrite ``chinese -> english`` (both trimmed).

    Raises:
        ValidationError: If either field is blank after trimming
    """
    key = _require("chinese", chinese)
    value = _require("english", english)
    updated = dict(overlay)
    updated[key] = value
    return updated


def edit_root(
    overlay: Mapping[str, str],
    old_chinese: str,
    new_chinese: str,
    new_english: str,
) -> dict[str, str]:
    """Rename and/or retranslate a root.

    When the Chinese key changes the old key is dropped first, so the
    result never holds both the old and the new key.

    Raises:
        ValidationError: If the new Chinese or English is blank
    """
    key = _require("chinese", new_chinese)
    value = _require("english", new_english)
    updated = dict(overlay)
    if old_chinese != key:
        updated.pop(old_chinese, None)
    updated[key] = value
    return updated


def delete_root(overlay: Mapping[str, str], chinese: str) -> dict[str, str]:
    """Drop ``chinese`` if present; a missing key is a no-op."""
    updated = dict(overlay)
    updated.pop(chinese, None)
    return updated


def apply_import(overlay: Mapping[str, str], pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Apply ``(chinese, english)`` pairs in order with add semantics.

    A key repeated in ``pairs`` ends up with its last value.
    """
    updated = dict(overlay)
    for chinese, english in pairs:
        updated[_require("chinese", chinese)] = _require("english", english)
    return updated
