"""
Контракты DTO проекта.

Все контракты используют Pydantic v2 для валидации.

Контракты:
- Conversion -> вызывающий код: AddressListDTO
- Пакетная обработка: DocumentReportDTO, BatchReportDTO
"""

from .address_list_dto import AddressListDTO, DocumentReportDTO, BatchReportDTO

__all__ = [
    "AddressListDTO",
    "DocumentReportDTO",
    "BatchReportDTO",
]
