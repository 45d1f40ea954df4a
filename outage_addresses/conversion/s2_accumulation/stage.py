"""
Stage 2: Accumulation - конечный автомат сборки иерархии адресов.

ЦКП: Упорядоченный список адресов из строк одного документа.

Input: строки документа (в исходном порядке)
Output: AccumulationResult (строки адресов + счётчики)

Алгоритм:
1. Классификация строки (LineClassifier)
2. До первой группы и до первой префектуры строки пропускаются
3. Смена группы / префектуры / муниципалитета сбрасывает накопленную
   запись в AddressExpander; повтор того же значения ничего не меняет
4. Фрагмент адреса до первого муниципалитета - FormatViolationError
5. В конце документа запись сбрасывается безусловно
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional
from loguru import logger

from ..domain.exceptions import FormatViolationError
from ..s1_classification.line_classifier import LineClassifier, LineKind
from ..s3_expansion.address_expander import AddressExpander


@dataclass
class ParseState:
    """
    Рабочее состояние разбора одного документа.

    pending_local_text непуст только когда известны группа, префектура
    и муниципалитет.
    """
    group_number: Optional[int] = None
    prefecture: Optional[str] = None
    municipality: Optional[str] = None
    pending_local_text: List[str] = field(default_factory=list)

    @property
    def local_text(self) -> str:
        return "".join(self.pending_local_text)

    @property
    def is_complete(self) -> bool:
        return (
            self.group_number is not None
            and self.prefecture is not None
            and self.municipality is not None
        )

    def append_local(self, text: str) -> None:
        self.pending_local_text.append(text)

    def clear_local(self) -> None:
        self.pending_local_text.clear()


@dataclass
class AccumulationResult:
    """
    Результат Stage 2: Accumulation.
    """
    address_lines: List[str] = field(default_factory=list)
    total_lines: int = 0
    skipped_lines: int = 0
    flush_count: int = 0

    def to_dict(self) -> dict:
        return {
            "address_lines": list(self.address_lines),
            "addresses_count": len(self.address_lines),
            "total_lines": self.total_lines,
            "skipped_lines": self.skipped_lines,
            "flush_count": self.flush_count,
        }


class AccumulationStage:
    """
    Stage 2: Accumulation.

    Использует:
    - LineClassifier: тип строки
    - AddressExpander: развёртывание записи при сбросе
    """

    def __init__(
        self,
        line_classifier: Optional[LineClassifier] = None,
        address_expander: Optional[AddressExpander] = None
    ):
        self.line_classifier = line_classifier or LineClassifier()
        self.address_expander = address_expander or AddressExpander(self.line_classifier.config)

    def process(self, lines: Iterable[str]) -> AccumulationResult:
        """
        Проходит по строкам документа и собирает адреса.

        Raises:
            FormatViolationError: Фрагмент адреса до первого муниципалитета
            GroupNumberFormatError: Некорректный номер группы
        """
        state = ParseState()
        result = AccumulationResult()

        for line_number, raw_line in enumerate(lines, start=1):
            result.total_lines += 1
            line = self.line_classifier.classify(raw_line)

            if line.is_ignorable:
                result.skipped_lines += 1
                continue

            if line.kind == LineKind.GROUP:
                if state.group_number is not None and state.group_number != line.value:
                    self._flush(state, result)
                    logger.debug(f"[Accumulation] Группа {state.group_number} -> {line.value}")
                state.group_number = line.value
                continue

            if state.group_number is None:
                # До первой группы - преамбула
                result.skipped_lines += 1
                continue

            if line.kind == LineKind.PREFECTURE:
                if state.prefecture is not None and state.prefecture != line.value:
                    self._flush(state, result)
                state.prefecture = line.value
                continue

            if state.prefecture is None:
                result.skipped_lines += 1
                continue

            if line.kind == LineKind.MUNICIPALITY:
                if state.municipality is not None and state.municipality != line.value:
                    self._flush(state, result)
                state.municipality = line.value
                continue

            if state.municipality is None:
                raise FormatViolationError(
                    message=f"Не удалось определить муниципалитет (строка {line_number}): {line.text}",
                    line=line.text,
                    component="AccumulationStage"
                )

            state.append_local(line.text)

        self._flush(state, result)

        logger.debug(
            f"[Accumulation] Строк: {result.total_lines}, пропущено: {result.skipped_lines}, "
            f"адресов: {len(result.address_lines)}"
        )
        return result

    def _flush(self, state: ParseState, result: AccumulationResult) -> None:
        """Развёртывает текущую запись и очищает буфер адресов."""
        address_lines = self.address_expander.expand(
            state.group_number,
            state.prefecture,
            state.municipality,
            state.local_text
        )
        if address_lines:
            result.flush_count += 1
            result.address_lines.extend(address_lines)
        state.clear_local()
