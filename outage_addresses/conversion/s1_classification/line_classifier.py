"""
Line Classifier - Классификация строк графика отключений.

ЦКП: Определение типа строки (номер страницы / группа / префектура /
муниципалитет / фрагмент адреса) и извлечение значения маркера.

SRP: Только классификация одной строки, без состояния.

Порядок проверок:
1. Пустая строка
2. Номер страницы (1-2 ASCII-цифры)
3. Группа (第...グループ)
4. Префектура (【...】)
5. Муниципалитет (суффикс 市/区/町/村, без разделителя адресов)
6. Всё остальное - фрагмент адреса
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..domain.exceptions import GroupNumberFormatError
from ..markers.marker_config import MarkerConfig


class LineKind(Enum):
    BLANK = "blank"
    PAGE_NUMBER = "page_number"
    GROUP = "group"
    PREFECTURE = "prefecture"
    MUNICIPALITY = "municipality"
    LOCAL_ADDRESS = "local_address"


@dataclass(frozen=True)
class ClassifiedLine:
    """Строка после классификации."""
    kind: LineKind
    text: str                                   # Строка после strip()
    value: Union[int, str, None] = None         # Номер группы / название

    @property
    def is_ignorable(self) -> bool:
        return self.kind in (LineKind.BLANK, LineKind.PAGE_NUMBER)

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "text": self.text, "value": self.value}


class LineClassifier:
    """
    Классификатор строк графика отключений.

    ЦКП: Тип строки и значение маркера.
    """

    def __init__(self, config: Optional[MarkerConfig] = None):
        self.config = config or MarkerConfig.load()

    def classify(self, line: str) -> ClassifiedLine:
        """
        Классифицирует одну строку.

        Args:
            line: Сырая строка (strip выполняется здесь)

        Returns:
            ClassifiedLine

        Raises:
            GroupNumberFormatError: Строка группы с некорректным номером
        """
        text = line.strip()

        if not text:
            return ClassifiedLine(LineKind.BLANK, text)

        if self.is_page_number_line(text):
            return ClassifiedLine(LineKind.PAGE_NUMBER, text)

        if self.is_group_line(text):
            return ClassifiedLine(LineKind.GROUP, text, self.parse_group_number(text))

        if self.is_prefecture_line(text):
            name = text[len(self.config.prefecture_prefix):len(text) - len(self.config.prefecture_suffix)]
            return ClassifiedLine(LineKind.PREFECTURE, text, name)

        if self.is_municipality_line(text):
            return ClassifiedLine(LineKind.MUNICIPALITY, text, text)

        return ClassifiedLine(LineKind.LOCAL_ADDRESS, text, text)

    def is_page_number_line(self, text: str) -> bool:
        # Номер страницы - только ASCII-цифры, полноширинные не считаются
        if not text or len(text) > self.config.page_number_max_length:
            return False
        return all('0' <= c <= '9' for c in text)

    def is_group_line(self, text: str) -> bool:
        return text.startswith(self.config.group_prefix) and text.endswith(self.config.group_suffix)

    def is_prefecture_line(self, text: str) -> bool:
        prefix = self.config.prefecture_prefix
        suffix = self.config.prefecture_suffix
        return (
            len(text) >= len(prefix) + len(suffix)
            and text.startswith(prefix)
            and text.endswith(suffix)
        )

    def is_municipality_line(self, text: str) -> bool:
        if not text.endswith(tuple(self.config.municipality_suffixes)):
            return False
        return self.config.separator_regexp.search(text) is None

    def parse_group_number(self, text: str) -> int:
        """
        Извлекает номер группы между префиксом и суффиксом.

        Полноширинные цифры (１２) разбираются так же, как обычные (12).
        """
        start = len(self.config.group_prefix)
        end = len(text) - len(self.config.group_suffix)
        digits = text[start:end] if end > start else ""

        if not digits.isdecimal() or int(digits) == 0:
            raise GroupNumberFormatError(
                message=f"Некорректный номер группы: {text}",
                line=text,
                component="LineClassifier"
            )
        return int(digits)
