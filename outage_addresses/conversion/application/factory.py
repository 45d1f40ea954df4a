"""
Фабрика для создания компонентов домена Conversion.

Собирает пайплайн разбора, экстрактор и драйвер пакетной обработки
из настроек проекта.
"""

from typing import Optional
from loguru import logger

from config import settings

from ..domain.interfaces import IAddressListConverter, ILineExtractor
from ..infrastructure.file_manager import ConversionFileManager
from ..infrastructure.pdftotext_extractor import PdfToTextExtractor
from ..markers.marker_config import MarkerConfig
from ..pipeline import AddressListPipeline
from .batch_converter import BatchConverter


class ConversionComponentFactory:
    """
    Фабрика для создания компонентов домена Conversion.
    """

    @staticmethod
    def create_file_manager() -> ConversionFileManager:
        logger.debug("[Conversion] Создание менеджера файлов")
        return ConversionFileManager(encoding=settings.ENCODING)

    @staticmethod
    def create_marker_config(vocabulary: Optional[str] = None) -> MarkerConfig:
        return MarkerConfig.load(vocabulary or settings.DEFAULT_MARKER_VOCABULARY)

    @staticmethod
    def create_pipeline(marker_config: Optional[MarkerConfig] = None) -> IAddressListConverter:
        """
        Создает пайплайн разбора документа.

        Args:
            marker_config: Словарь маркеров (по умолчанию из настроек)
        """
        logger.debug("[Conversion] Создание пайплайна разбора")
        config = marker_config or ConversionComponentFactory.create_marker_config()
        return AddressListPipeline(marker_config=config)

    @staticmethod
    def create_line_extractor(
        file_manager: Optional[ConversionFileManager] = None,
        keep_raw_text: bool = True
    ) -> ILineExtractor:
        """
        Создает экстрактор строк через pdftotext.

        Args:
            file_manager: Менеджер файлов (опционально)
            keep_raw_text: Оставлять ли .rawtxt рядом с PDF
        """
        logger.debug(f"[Conversion] Создание экстрактора: {settings.PDFTOTEXT_BINARY}")
        return PdfToTextExtractor(
            binary=settings.PDFTOTEXT_BINARY,
            temp_extension=settings.TEMP_EXTENSION,
            file_manager=file_manager or ConversionComponentFactory.create_file_manager(),
            keep_raw_text=keep_raw_text,
        )

    @staticmethod
    def create_batch_converter(
        fail_fast: bool = False,
        keep_raw_text: bool = True,
        line_extractor: Optional[ILineExtractor] = None,
        converter: Optional[IAddressListConverter] = None
    ) -> BatchConverter:
        """
        Создает драйвер пакетной обработки со всеми зависимостями.

        Args:
            fail_fast: Прерывать пакет при первой ошибке формата
            keep_raw_text: Оставлять ли .rawtxt рядом с PDF
            line_extractor: Экстрактор (опционально, для тестов)
            converter: Пайплайн разбора (опционально)
        """
        file_manager = ConversionComponentFactory.create_file_manager()
        return BatchConverter(
            line_extractor=line_extractor or ConversionComponentFactory.create_line_extractor(
                file_manager=file_manager,
                keep_raw_text=keep_raw_text,
            ),
            converter=converter or ConversionComponentFactory.create_pipeline(),
            file_manager=file_manager,
            in_extension=settings.IN_EXTENSION,
            out_extension=settings.OUT_EXTENSION,
            fail_fast=fail_fast,
        )
