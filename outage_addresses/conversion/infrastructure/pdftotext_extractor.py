"""
Экстрактор текста из PDF через внешний инструмент pdftotext.

ЦКП: Строки текста документа в исходном порядке.

Сырой текст сохраняется рядом с PDF (<имя>.rawtxt) и затем читается.
"""

import subprocess
from pathlib import Path
from typing import List, Optional
from loguru import logger

from ..domain.interfaces import ILineExtractor
from ..domain.exceptions import TextExtractionError, ConversionFileSystemError
from .file_manager import ConversionFileManager


class PdfToTextExtractor(ILineExtractor):
    """Извлечение строк из PDF через pdftotext."""

    def __init__(
        self,
        binary: str = "pdftotext",
        temp_extension: str = "rawtxt",
        file_manager: Optional[ConversionFileManager] = None,
        keep_raw_text: bool = True
    ):
        """
        Args:
            binary: Путь к pdftotext
            temp_extension: Расширение файла сырого текста
            file_manager: Менеджер файлов (опционально)
            keep_raw_text: Оставлять ли .rawtxt после чтения
        """
        self.binary = binary
        self.temp_extension = temp_extension
        self.file_manager = file_manager or ConversionFileManager()
        self.keep_raw_text = keep_raw_text

    def extract_lines(self, document_path: Path) -> List[str]:
        """
        Запускает pdftotext и читает результат.

        Raises:
            TextExtractionError: Инструмент не найден, завершился с ошибкой
                или результат не удалось прочитать
        """
        raw_text_path = self.file_manager.replace_extension(document_path, self.temp_extension).absolute()

        try:
            self.file_manager.remove_file(raw_text_path)
        except ConversionFileSystemError as e:
            raise TextExtractionError(
                message=f"Не удалось удалить старый файл сырого текста: {raw_text_path}",
                component="PdfToTextExtractor",
                original_error=e
            )

        cmd = [self.binary, str(document_path.absolute()), str(raw_text_path)]
        logger.debug(f"[Extractor] Запуск: {' '.join(cmd)}")

        try:
            completed = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as e:
            raise TextExtractionError(
                message=f"Не удалось запустить {self.binary}",
                component="PdfToTextExtractor",
                original_error=e
            )

        if completed.returncode != 0:
            stderr = (completed.stderr or "").strip()
            raise TextExtractionError(
                message=(
                    f"Извлечение текста завершилось с кодом {completed.returncode}: {raw_text_path}"
                    + (f" ({stderr})" if stderr else "")
                ),
                component="PdfToTextExtractor"
            )

        try:
            lines = self.file_manager.read_lines(raw_text_path)
        except ConversionFileSystemError as e:
            raise TextExtractionError(
                message=f"Не удалось прочитать извлечённый текст: {raw_text_path}",
                component="PdfToTextExtractor",
                original_error=e
            )

        if not self.keep_raw_text:
            self.file_manager.remove_file(raw_text_path)

        logger.debug(f"[Extractor] {document_path.name}: {len(lines)} строк")
        return lines
