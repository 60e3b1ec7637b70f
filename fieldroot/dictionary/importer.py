"""
Bulk import of word roots from comma-separated tables.

Expected format:
    中文全称,英文缩写[,other columns...]
    交易,trade
    日期,date

The header row must name one Chinese column (中文全称 or 中文) and one
English column (英文缩写 or 英文); column order is free and extra
columns are ignored. Import is two-step: ``preview_import`` classifies
each row as add/update without changing anything, and
``DictionaryStore.import_commit`` applies a preview.
"""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from fieldroot.config import CHINESE_HEADERS, ENGLISH_HEADERS
from fieldroot.errors import FormatError
from fieldroot.models import ImportAction, ImportRow

logger = logging.getLogger(__name__)


def _find_column(headers: list[str], aliases: Sequence[str]) -> int | None:
    for index, header in enumerate(headers):
        if header in aliases:
            return index
    return None


def _cell(row: list[str], index: int) -> str:
    return row[index].strip() if index < len(row) else ""


def read_table(raw_table: str) -> list[list[str]]:
    """Parse CSV text into rows, dropping blank lines and a leading BOM."""
    text = raw_table.lstrip("\ufeff").strip()
    reader = csv.reader(io.StringIO(text))
    try:
        return [row for row in reader if any(cell.strip() for cell in row)]
    except csv.Error as e:
        raise FormatError(f"CSV解析失败（第 {reader.line_num} 行）：{e}") from e


def preview_import(
    raw_table: str,
    dictionary: Mapping[str, str],
    chinese_columns: Sequence[str] = CHINESE_HEADERS,
    english_columns: Sequence[str] = ENGLISH_HEADERS,
) -> list[ImportRow]:
    """Classify the rows of a bulk-import table without applying them.

    Args:
        raw_table: CSV text, first row is the header
        dictionary: Current effective dictionary, used to tell adds
            from updates
        chinese_columns: Accepted headers for the Chinese column
        english_columns: Accepted headers for the English column

    Returns:
        Preview rows in table order

    Raises:
        FormatError: If the table has no data row or lacks either column
    """
    rows = read_table(raw_table)
    if len(rows) < 2:
        raise FormatError("导入文件至少需要包含表头和一行数据")

    headers = [h.strip() for h in rows[0]]
    chinese_index = _find_column(headers, chinese_columns)
    english_index = _find_column(headers, english_columns)
    if chinese_index is None or english_index is None:
        raise FormatError(
            f'CSV格式错误：需要包含"{chinese_columns[0]}"和"{english_columns[0]}"列'
        )

    preview = []
    skipped = 0
    for row in rows[1:]:
        chinese = _cell(row, chinese_index)
        english = _cell(row, english_index)
        if not chinese or not english:
            skipped += 1
            continue
        action = ImportAction.UPDATE if chinese in dictionary else ImportAction.ADD
        preview.append(ImportRow(chinese, english, action))

    if skipped:
        logger.info("Skipped %d import rows with a blank cell", skipped)
    return preview


def preview_import_file(
    path: str | Path,
    dictionary: Mapping[str, str],
    chinese_columns: Sequence[str] = CHINESE_HEADERS,
    english_columns: Sequence[str] = ENGLISH_HEADERS,
) -> list[ImportRow]:
    """Read a CSV file (UTF-8, BOM allowed) and preview it.

    Raises:
        FormatError: If the file is not UTF-8 or not a valid import table
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            raw_table = f.read()
    except UnicodeDecodeError as e:
        raise FormatError(f"文件不是有效的UTF-8编码：{path}") from e
    return preview_import(raw_table, dictionary, chinese_columns, english_columns)
