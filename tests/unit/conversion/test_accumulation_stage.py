"""
Unit-тесты для Stage 2: Accumulation.

ЦКП: Проверка конечного автомата группа -> префектура -> муниципалитет -> адреса.
"""

import pytest

from outage_addresses.conversion.s2_accumulation import AccumulationStage, ParseState
from outage_addresses.conversion.domain.exceptions import (
    FormatViolationError,
    GroupNumberFormatError,
)


@pytest.fixture
def stage():
    return AccumulationStage()


SAMPLE_LINES = [
    "第１グループ",
    "【宮城県】",
    "仙台市青葉区",
    "一番町１－１，二番町２－２",
    "第２グループ",
]


class TestSampleDocument:
    """Базовый сценарий из графика отключений."""

    def test_group_change_flushes_record(self, stage):
        result = stage.process(SAMPLE_LINES)
        assert result.address_lines == [
            "宮城県仙台市青葉区一番町１－１ 1",
            "宮城県仙台市青葉区二番町２－２ 1",
        ]
        assert result.flush_count == 1

    def test_page_numbers_and_blanks_are_transparent(self, stage):
        expected = stage.process(SAMPLE_LINES).address_lines

        for position in range(len(SAMPLE_LINES) + 1):
            for noise in ("12", "", "  "):
                lines = SAMPLE_LINES[:position] + [noise] + SAMPLE_LINES[position:]
                assert stage.process(lines).address_lines == expected

    def test_empty_document(self, stage):
        result = stage.process([])
        assert result.address_lines == []
        assert result.total_lines == 0


class TestIdempotentMarkers:
    """Повтор маркера с тем же значением не сбрасывает запись."""

    def test_repeated_markers_across_page_break(self, stage):
        lines = [
            "第１グループ",
            "【宮城県】",
            "仙台市",
            "一番町１－１，",
            "3",
            "第１グループ",
            "【宮城県】",
            "仙台市",
            "二番町２－２",
        ]
        result = stage.process(lines)
        assert result.address_lines == [
            "宮城県仙台市一番町１－１ 1",
            "宮城県仙台市二番町２－２ 1",
        ]
        assert result.flush_count == 1

    def test_full_and_half_width_group_are_same(self, stage):
        lines = ["第1グループ", "【宮城県】", "仙台市", "大町１，", "第１グループ", "本町２"]
        result = stage.process(lines)
        assert result.address_lines == ["宮城県仙台市大町１ 1", "宮城県仙台市本町２ 1"]

    def test_repeated_prefecture_before_municipality_is_not_fatal(self, stage):
        lines = ["第1グループ", "【宮城県】", "【宮城県】", "仙台市", "大町１"]
        assert stage.process(lines).address_lines == ["宮城県仙台市大町１ 1"]


class TestValueChanges:
    """Смена значения иерархии - ровно один сброс с прежними значениями."""

    def test_municipality_change(self, stage):
        lines = ["第1グループ", "【宮城県】", "仙台市青葉区", "一番町１", "名取市", "増田１"]
        result = stage.process(lines)
        assert result.address_lines == [
            "宮城県仙台市青葉区一番町１ 1",
            "宮城県名取市増田１ 1",
        ]
        assert result.flush_count == 2

    def test_prefecture_change(self, stage):
        lines = ["第1グループ", "【宮城県】", "仙台市", "一番町１", "【福島県】", "福島市", "大町１"]
        assert stage.process(lines).address_lines == [
            "宮城県仙台市一番町１ 1",
            "福島県福島市大町１ 1",
        ]

    def test_group_change_keeps_prefecture_and_municipality(self, stage):
        lines = ["第1グループ", "【宮城県】", "仙台市", "一番町１", "第2グループ", "二番町２"]
        assert stage.process(lines).address_lines == [
            "宮城県仙台市一番町１ 1",
            "宮城県仙台市二番町２ 2",
        ]

    def test_prefecture_change_keeps_municipality(self, stage):
        lines = ["第1グループ", "【宮城県】", "仙台市", "一番町１", "【福島県】", "大町１"]
        assert stage.process(lines).address_lines == [
            "宮城県仙台市一番町１ 1",
            "福島県仙台市大町１ 1",
        ]

    def test_fragments_are_concatenated_without_separator(self, stage):
        lines = ["第1グループ", "【宮城県】", "仙台市", "一番町１－", "１，本町２"]
        assert stage.process(lines).address_lines == [
            "宮城県仙台市一番町１－１ 1",
            "宮城県仙台市本町２ 1",
        ]

    def test_municipality_without_addresses_emits_nothing(self, stage):
        lines = ["第1グループ", "【宮城県】", "仙台市", "名取市", "増田１"]
        result = stage.process(lines)
        assert result.address_lines == ["宮城県名取市増田１ 1"]
        assert result.flush_count == 1


class TestPreamble:
    """Строки до группы и до префектуры пропускаются."""

    def test_lines_before_group_and_prefecture_skipped(self, stage):
        lines = [
            "計画停電のお知らせ",
            "東北電力株式会社",
            "第1グループ",
            "対象地域は以下のとおり",
            "【宮城県】",
            "仙台市",
            "一番町１",
        ]
        result = stage.process(lines)
        assert result.address_lines == ["宮城県仙台市一番町１ 1"]
        assert result.skipped_lines == 3
        assert result.total_lines == 7

    def test_municipality_before_prefecture_is_skipped(self, stage):
        lines = ["第1グループ", "仙台市", "【宮城県】", "名取市", "増田１"]
        assert stage.process(lines).address_lines == ["宮城県名取市増田１ 1"]


class TestFatalErrors:
    """Нарушения формата прерывают документ."""

    def test_local_address_before_municipality(self, stage):
        lines = ["第1グループ", "【宮城県】", "一番町１－１"]
        with pytest.raises(FormatViolationError) as exc_info:
            stage.process(lines)
        assert exc_info.value.line == "一番町１－１"
        assert "一番町１－１" in str(exc_info.value)

    def test_malformed_group_number(self, stage):
        lines = ["第1グループ", "【宮城県】", "仙台市", "一番町１", "第Xグループ"]
        with pytest.raises(GroupNumberFormatError):
            stage.process(lines)


class TestParseState:
    """Рабочее состояние разбора."""

    def test_new_state_is_empty(self):
        state = ParseState()
        assert not state.is_complete
        assert state.local_text == ""

    def test_local_text_buffer(self):
        state = ParseState(group_number=1, prefecture="宮城県", municipality="仙台市")
        state.append_local("一番町１，")
        state.append_local("二番町２")
        assert state.is_complete
        assert state.local_text == "一番町１，二番町２"

        state.clear_local()
        assert state.local_text == ""

    def test_each_document_gets_fresh_state(self, stage):
        stage.process(["第1グループ", "【宮城県】", "仙台市", "一番町１"])
        with pytest.raises(FormatViolationError):
            stage.process(["第2グループ", "【宮城県】", "二番町２"])
