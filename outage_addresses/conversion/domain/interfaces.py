"""
Интерфейсы (абстрактные классы) для домена Conversion.

Домен Conversion отвечает за:
1. Получение строк текста из документа (внешний экстрактор)
2. Классификацию строк и сборку иерархии адресов
3. Развёртывание адресов в итоговый список
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List


class ILineExtractor(ABC):
    """Интерфейс для извлечения строк текста из документа."""

    @abstractmethod
    def extract_lines(self, document_path: Path) -> List[str]:
        """
        Извлекает строки текста из документа в исходном порядке.

        Args:
            document_path: Путь к документу (PDF)

        Returns:
            Список строк

        Raises:
            TextExtractionError: Если извлечение не удалось
        """
        pass


class IAddressListConverter(ABC):
    """Интерфейс для преобразования строк документа в список адресов."""

    @abstractmethod
    def process(self, lines: Iterable[str], source_file: str = ""):
        """
        Преобразует строки одного документа в список адресов.

        Args:
            lines: Строки документа
            source_file: Имя исходного файла

        Returns:
            AddressListDTO
        """
        pass
