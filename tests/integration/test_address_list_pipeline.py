#!/usr/bin/env python3
"""
Интеграционные тесты AddressListPipeline.

Цель: Проверить что пайплайн превращает строки графика отключений
в AddressListDTO с корректным текстом для записи в файл.
"""

import pytest
from unittest.mock import MagicMock

from contracts.address_list_dto import AddressListDTO
from outage_addresses.conversion import AddressListPipeline
from outage_addresses.conversion.domain.exceptions import ConversionError, FormatViolationError


SCHEDULE_LINES = [
    "計画停電 実施予定地域",
    "",
    "第１グループ",
    "【宮城県】",
    "仙台市青葉区",
    "一番町１－１，二番町２－２，",
    "国分町３－３",
    "1",
    "名取市",
    "増田１",
    "【山形県】",
    "山形市",
    "本町１，旅篭町２",
    "第２グループ",
    "【宮城県】",
    "仙台市青葉区",
    "中央１",
    "2",
]


@pytest.fixture
def pipeline():
    return AddressListPipeline()


def test_full_schedule(pipeline):
    dto = pipeline.process(SCHEDULE_LINES, source_file="schedule.pdf")

    assert isinstance(dto, AddressListDTO)
    assert dto.source_file == "schedule.pdf"
    assert dto.address_lines == [
        "宮城県仙台市青葉区一番町１－１ 1",
        "宮城県仙台市青葉区二番町２－２ 1",
        "宮城県仙台市青葉区国分町３－３ 1",
        "宮城県名取市増田１ 1",
        "山形県山形市本町１ 1",
        "山形県山形市旅篭町２ 1",
        "宮城県仙台市青葉区中央１ 2",
    ]
    assert dto.line_count == 7


def test_metrics(pipeline):
    dto = pipeline.process(SCHEDULE_LINES)

    assert dto.metrics["total_lines"] == len(SCHEDULE_LINES)
    assert dto.metrics["skipped_lines"] == 4
    assert dto.metrics["flush_count"] == 4
    assert dto.metrics["processing_time_ms"] >= 0


def test_to_text(pipeline):
    dto = pipeline.process(["第1グループ", "【宮城県】", "仙台市", "大町１，本町２"])
    assert dto.to_text() == "宮城県仙台市大町１ 1\n宮城県仙台市本町２ 1\n"


def test_empty_document_to_text(pipeline):
    dto = pipeline.process([])
    assert dto.address_lines == []
    assert dto.to_text() == ""


def test_duplicates_are_kept(pipeline):
    dto = pipeline.process(["第1グループ", "【宮城県】", "仙台市", "大町１，大町１"])
    assert dto.address_lines == ["宮城県仙台市大町１ 1", "宮城県仙台市大町１ 1"]


def test_format_violation_propagates(pipeline):
    with pytest.raises(FormatViolationError):
        pipeline.process(["第1グループ", "【宮城県】", "大町１"], source_file="broken.pdf")


def test_unexpected_error_is_wrapped():
    stage = MagicMock()
    stage.process.side_effect = ValueError("boom")
    pipeline = AddressListPipeline(accumulation_stage=stage)

    with pytest.raises(ConversionError) as exc_info:
        pipeline.process(["第1グループ"], source_file="x.pdf")
    assert isinstance(exc_info.value.original_error, ValueError)
    assert exc_info.value.component == "AddressListPipeline"
