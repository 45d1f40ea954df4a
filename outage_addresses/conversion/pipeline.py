"""
Address List Pipeline - оркестратор разбора одного документа.

Координирует этапы в строгом порядке:
1. Classification → 2. Accumulation → 3. Expansion

Возвращает AddressListDTO.
"""

import time
from typing import Iterable, Optional
from loguru import logger

from contracts.address_list_dto import AddressListDTO

from .domain.interfaces import IAddressListConverter
from .domain.exceptions import ConversionError
from .markers.marker_config import MarkerConfig
from .s1_classification import LineClassifier
from .s2_accumulation import AccumulationStage
from .s3_expansion import AddressExpander


class AddressListPipeline(IAddressListConverter):
    """
    Пайплайн разбора графика отключений.

    ЦКП: AddressListDTO со списком адресов документа.
    """

    def __init__(
        self,
        accumulation_stage: Optional[AccumulationStage] = None,
        marker_config: Optional[MarkerConfig] = None,
    ):
        """
        Args:
            accumulation_stage: Этап сборки (по умолчанию создаётся стандартный)
            marker_config: Словарь маркеров (по умолчанию ja_JP)
        """
        if accumulation_stage is None:
            config = marker_config or MarkerConfig.load()
            accumulation_stage = AccumulationStage(
                line_classifier=LineClassifier(config),
                address_expander=AddressExpander(config),
            )
        self.accumulation_stage = accumulation_stage

        logger.debug("[AddressListPipeline] Инициализирован")

    def process(self, lines: Iterable[str], source_file: str = "") -> AddressListDTO:
        """
        Преобразует строки документа в список адресов.

        Raises:
            ConversionFormatError: Документ не соответствует формату
            ConversionError: Неожиданная ошибка
        """
        start_time = time.time()
        logger.debug(f"[AddressListPipeline] Старт обработки: {source_file or '<lines>'}")

        try:
            result = self.accumulation_stage.process(lines)
        except ConversionError:
            raise
        except Exception as e:
            raise ConversionError(
                message=f"Неожиданная ошибка при разборе: {source_file}",
                component="AddressListPipeline",
                original_error=e
            )

        processing_time_ms = (time.time() - start_time) * 1000
        logger.info(
            f"[AddressListPipeline] {source_file or '<lines>'}: "
            f"{len(result.address_lines)} адресов за {processing_time_ms:.1f} ms"
        )

        return AddressListDTO(
            source_file=source_file,
            address_lines=result.address_lines,
            metrics={
                "processing_time_ms": processing_time_ms,
                "total_lines": float(result.total_lines),
                "skipped_lines": float(result.skipped_lines),
                "flush_count": float(result.flush_count),
            },
        )
