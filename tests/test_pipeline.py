"""
Tests for batch translation and TranslationSession.

Run with: pytest tests/test_pipeline.py -v
"""

import pytest

from fieldroot.dictionary.storage import MemoryStorage
from fieldroot.dictionary.store import DictionaryStore
from fieldroot.errors import ValidationError
from fieldroot.models import TranslationRow
from fieldroot.pipeline import TranslationSession, rows_from_text, translate_rows, translate_text


@pytest.fixture
def roots():
    return {"交易": "trade", "日期": "date"}


@pytest.fixture
def session():
    store = DictionaryStore(base={"交易": "trade", "日期": "date"}, storage=MemoryStorage())
    return TranslationSession(store)


class TestTranslateRows:
    """Tests for translate_rows()."""

    def test_scenario_all_known(self, roots):
        rows = translate_rows([TranslationRow("交易日期")], roots)

        assert rows == [TranslationRow("交易日期", "trade_date")]

    def test_scenario_unknown_characters(self):
        rows = translate_rows([TranslationRow("交易时间")], {"交易": "trade"})

        assert rows[0].english == "trade__"

    def test_blank_rows_pass_through(self, roots):
        """Blank rows keep whatever they had."""
        blank = TranslationRow("   ", "stale")

        rows = translate_rows([blank, TranslationRow("")], roots)

        assert rows == [blank, TranslationRow("")]

    def test_stale_english_recomputed(self, roots):
        rows = translate_rows([TranslationRow("交易", "old")], roots)

        assert rows[0].english == "trade"

    def test_idempotent(self, roots):
        """Translating twice gives the same rows as translating once."""
        rows = [TranslationRow("交易日期"), TranslationRow(""), TranslationRow("日期交易时")]

        once = translate_rows(rows, roots)
        twice = translate_rows(once, roots)

        assert once == twice

    def test_input_not_modified(self, roots):
        rows = [TranslationRow("交易")]
        translate_rows(rows, roots)

        assert rows == [TranslationRow("交易")]

    def test_separator(self, roots):
        assert translate_rows([TranslationRow("交易日期")], roots, separator="")[0].english == "tradedate"

    def test_translate_text(self, roots):
        assert translate_text("日期", roots) == "date"
        assert translate_text("", roots) == ""

    def test_rows_from_text(self):
        rows = rows_from_text("  交易日期 \n\n时间戳\n   \n存款金额")

        assert [r.chinese for r in rows] == ["交易日期", "时间戳", "存款金额"]
        assert all(r.english == "" for r in rows)

    def test_rows_from_empty_text(self):
        assert rows_from_text("") == []
        assert rows_from_text("  \n ") == []


class TestTranslationSession:
    """Tests for TranslationSession."""

    def test_load_and_translate(self, session):
        session.load_text("交易日期\n交易时间")

        rows = session.translate()

        assert [r.english for r in rows] == ["trade_date", "trade__"]

    def test_add_root_retranslates(self, session):
        """Adding a root updates rows that had unknown characters."""
        session.load_text("交易时间")
        session.translate()

        rows = session.add_root("时间", "time")

        assert rows[0].english == "trade_time"
        assert session.rows[0].english == "trade_time"

    def test_edit_root_retranslates(self, session):
        session.load_text("交易时间")
        session.add_root("时间", "time")

        rows = session.edit_root("时间", "时间", "tm")

        assert rows[0].english == "trade_tm"

    def test_delete_root_retranslates(self, session):
        session.load_text("交易时间")
        session.add_root("时间", "time")

        rows = session.delete_root("时间")

        assert rows[0].english == "trade__"

    def test_clear_roots_retranslates(self, session):
        session.load_text("交易时间")
        session.add_root("交易", "deal")
        session.add_root("时间", "time")

        rows = session.clear_roots()

        assert rows[0].english == "trade__"

    def test_commit_import_retranslates(self, session):
        session.load_text("存款金额")
        preview = session.store.import_preview("中文,英文\n存款,deposit\n金额,amt")

        rows = session.commit_import(preview)

        assert rows[0].english == "deposit_amt"

    def test_failed_add_keeps_rows(self, session):
        session.load_text("交易时间")
        session.translate()

        with pytest.raises(ValidationError):
            session.add_root("时间", "")

        assert session.rows[0].english == "trade__"

    def test_edit_row_marks_stale(self, session):
        session.load_text("交易")
        session.translate()

        session.edit_row(0, "日期")

        assert session.rows[0] == TranslationRow("日期", "")

    def test_add_and_delete_row(self, session):
        session.load_text("交易")
        session.add_row()
        session.add_row("日期")

        assert len(session.rows) == 3
        rows = session.translate()
        assert [r.english for r in rows] == ["trade", "", "date"]

        session.delete_row(1)
        assert [r.chinese for r in session.rows] == ["交易", "日期"]

    def test_bad_index(self, session):
        with pytest.raises(IndexError):
            session.edit_row(0, "交易")
        with pytest.raises(IndexError):
            session.delete_row(-1)

    def test_reset(self, session):
        session.load_text("交易")
        session.reset()

        assert session.rows == []
        assert session.translate() == []
