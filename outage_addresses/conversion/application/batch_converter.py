"""
Пакетная обработка директории с графиками отключений.

Для каждого <имя>.pdf в директории:
1. Извлечение строк (ILineExtractor)
2. Разбор в список адресов (IAddressListConverter)
3. Запись <имя>.txt рядом с исходным файлом

Ошибка одного документа не прерывает пакет (кроме fail_fast для ошибок формата).
"""

from pathlib import Path
from typing import Optional
from loguru import logger

from contracts.address_list_dto import BatchReportDTO, DocumentReportDTO

from ..domain.interfaces import IAddressListConverter, ILineExtractor
from ..domain.exceptions import ConversionError, ConversionFormatError
from ..infrastructure.file_manager import ConversionFileManager


class BatchConverter:
    """
    Драйвер пакетной обработки.

    Координирует:
    1. Поиск входных файлов
    2. Извлечение текста и разбор
    3. Сохранение списков адресов
    """

    def __init__(
        self,
        line_extractor: ILineExtractor,
        converter: IAddressListConverter,
        file_manager: Optional[ConversionFileManager] = None,
        in_extension: str = "pdf",
        out_extension: str = "txt",
        fail_fast: bool = False
    ):
        """
        Args:
            line_extractor: Экстрактор строк документа
            converter: Пайплайн разбора
            file_manager: Менеджер файлов (опционально)
            in_extension: Расширение входных файлов
            out_extension: Расширение итоговых файлов
            fail_fast: Прерывать пакет при первой ошибке формата документа
        """
        self.line_extractor = line_extractor
        self.converter = converter
        self.file_manager = file_manager or ConversionFileManager()
        self.in_extension = in_extension
        self.out_extension = out_extension
        self.fail_fast = fail_fast

    def convert_document(self, document_path: Path) -> DocumentReportDTO:
        """
        Обрабатывает один документ и сохраняет список адресов.

        Returns:
            DocumentReportDTO со статусом success

        Raises:
            TextExtractionError: Извлечение текста не удалось
            ConversionFormatError: Документ не соответствует формату
            ConversionFileSystemError: Не удалось записать результат
        """
        logger.info(f"[BatchConverter] Конвертация: {document_path.name}")

        lines = self.line_extractor.extract_lines(document_path)
        address_list = self.converter.process(lines, source_file=document_path.name)

        out_path = self.file_manager.replace_extension(document_path, self.out_extension)
        self.file_manager.write_text(out_path, address_list.to_text())

        logger.info(f"[BatchConverter] Готово: {out_path.name} ({address_list.line_count} адресов)")
        return DocumentReportDTO(
            file=document_path.name,
            status="success",
            output_file=out_path.name,
            address_count=address_list.line_count,
        )

    def convert_directory(self, directory_path: Path) -> BatchReportDTO:
        """
        Обрабатывает все входные файлы директории (без рекурсии).

        Raises:
            ConversionFileNotFoundError: Путь не является директорией
            ConversionFormatError: Только при fail_fast
        """
        logger.info(f"[BatchConverter] Поиск {self.in_extension.upper()} файлов в: {directory_path.absolute()}")
        documents = self.file_manager.list_target_files(directory_path, self.in_extension)

        if not documents:
            logger.warning(f"[BatchConverter] В директории нет {self.in_extension} файлов: {directory_path}")

        reports = []
        for document_path in documents:
            try:
                reports.append(self.convert_document(document_path))
            except ConversionFormatError as e:
                if self.fail_fast:
                    logger.error(f"[BatchConverter] Пакет прерван на {document_path.name}: {e}")
                    self._remove_stale_output(document_path)
                    raise
                reports.append(self._failed(document_path, e))
            except ConversionError as e:
                reports.append(self._failed(document_path, e))

        report = BatchReportDTO(directory=str(directory_path), documents=reports)
        logger.info(
            f"[BatchConverter] Пакетная обработка завершена: "
            f"{report.success} успешно, {report.failed} с ошибками"
        )
        return report

    def _failed(self, document_path: Path, error: ConversionError) -> DocumentReportDTO:
        logger.error(f"[BatchConverter] Ошибка при обработке {document_path.name}: {error}")
        self._remove_stale_output(document_path)
        return DocumentReportDTO(file=document_path.name, status="failed", error=str(error))

    def _remove_stale_output(self, document_path: Path) -> None:
        """Удаляет <имя>.txt от предыдущего запуска, чтобы не осталось устаревшего списка."""
        out_path = self.file_manager.replace_extension(document_path, self.out_extension)
        try:
            self.file_manager.remove_file(out_path)
        except ConversionError as e:
            logger.warning(f"[BatchConverter] Не удалось удалить устаревший {out_path.name}: {e}")
