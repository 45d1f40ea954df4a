"""
Менеджер файлов для домена Conversion.

Реализует файловые операции: поиск входных PDF, смена расширения,
чтение сырого текста и запись списка адресов.
"""

from pathlib import Path
from typing import List
from loguru import logger

from ..domain.exceptions import ConversionFileNotFoundError, ConversionFileWriteError


class ConversionFileManager:
    """Менеджер файлов для домена Conversion."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def list_target_files(self, directory_path: Path, extension: str) -> List[Path]:
        """
        Возвращает файлы с расширением extension непосредственно в директории.

        Args:
            directory_path: Путь к директории
            extension: Расширение без точки ("pdf")

        Returns:
            Отсортированный список путей

        Raises:
            ConversionFileNotFoundError: Если путь не является директорией
        """
        if not directory_path.is_dir():
            raise ConversionFileNotFoundError(
                message=f"Цель не является директорией: {directory_path}",
                component="ConversionFileManager"
            )

        return sorted(
            path for path in directory_path.iterdir()
            if path.is_file() and path.suffix == f".{extension}"
        )

    @staticmethod
    def replace_extension(file_path: Path, extension: str) -> Path:
        """Возвращает путь рядом с file_path с расширением extension."""
        return file_path.with_name(f"{file_path.stem}.{extension}")

    def read_lines(self, file_path: Path) -> List[str]:
        """
        Читает текстовый файл построчно (без символов перевода строки).

        Raises:
            ConversionFileNotFoundError: Если файл не существует
            ConversionFileWriteError: Если не удалось прочитать файл
        """
        if not file_path.exists():
            raise ConversionFileNotFoundError(
                message=f"Файл не найден: {file_path}",
                component="ConversionFileManager"
            )

        try:
            with open(file_path, 'r', encoding=self.encoding) as f:
                lines = f.read().splitlines()
        except (IOError, OSError, UnicodeDecodeError) as e:
            raise ConversionFileWriteError(
                message=f"Не удалось прочитать файл: {file_path}",
                component="ConversionFileManager",
                original_error=e
            )

        logger.debug(f"[Conversion] Прочитано {len(lines)} строк: {file_path}")
        return lines

    def write_text(self, file_path: Path, text: str) -> Path:
        """
        Записывает текст в файл.

        Raises:
            ConversionFileWriteError: Если не удалось сохранить файл
        """
        try:
            self.ensure_directory(file_path.parent)
            with open(file_path, 'w', encoding=self.encoding, newline='\n') as f:
                f.write(text)
        except (IOError, OSError) as e:
            raise ConversionFileWriteError(
                message=f"Не удалось сохранить файл: {file_path}",
                component="ConversionFileManager",
                original_error=e
            )

        logger.debug(f"[Conversion] Файл сохранен: {file_path}")
        return file_path

    def ensure_directory(self, directory_path: Path) -> Path:
        """
        Создает директорию если она не существует.

        Raises:
            ConversionFileWriteError: Если не удалось создать директорию
        """
        try:
            directory_path.mkdir(parents=True, exist_ok=True)
            return directory_path
        except (IOError, OSError) as e:
            raise ConversionFileWriteError(
                message=f"Не удалось создать директорию: {directory_path}",
                component="ConversionFileManager",
                original_error=e
            )

    def remove_file(self, file_path: Path) -> None:
        """Удаляет файл, если он существует."""
        try:
            if file_path.is_file():
                file_path.unlink()
                logger.debug(f"[Conversion] Файл удален: {file_path}")
        except OSError as e:
            raise ConversionFileWriteError(
                message=f"Не удалось удалить файл: {file_path}",
                component="ConversionFileManager",
                original_error=e
            )
