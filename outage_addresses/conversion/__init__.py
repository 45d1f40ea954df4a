"""
Домен Conversion: график плановых отключений -> список адресов.

Архитектура: 3-этапный разбор строк
- Stage 1: Classification (тип строки по текстовым маркерам)
- Stage 2: Accumulation (конечный автомат группа/префектура/муниципалитет)
- Stage 3: Expansion (развёртывание адресов по разделителю)

Вход: строки текста, извлечённые из PDF (pdftotext)
Выход: contracts.AddressListDTO
"""

from outage_addresses.conversion.pipeline import AddressListPipeline
from outage_addresses.conversion.markers import MarkerConfig

# Stage exports
from outage_addresses.conversion.s1_classification import LineClassifier, LineKind, ClassifiedLine
from outage_addresses.conversion.s2_accumulation import AccumulationStage, AccumulationResult, ParseState
from outage_addresses.conversion.s3_expansion import AddressExpander

__all__ = [
    # Pipeline
    "AddressListPipeline",
    "MarkerConfig",
    # Stages
    "LineClassifier",
    "LineKind",
    "ClassifiedLine",
    "AccumulationStage",
    "AccumulationResult",
    "ParseState",
    "AddressExpander",
]
