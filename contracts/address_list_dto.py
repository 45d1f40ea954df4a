"""
DTO контракт: Conversion -> вызывающий код (CLI, пакетная обработка).

Список адресов одного документа и отчёт о пакетной обработке.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class AddressListDTO(BaseModel):
    """
    Результат разбора одного документа.

    Порядок адресов совпадает с порядком в документе, дубликаты сохраняются.
    """

    source_file: str = Field("", description="Имя исходного файла")
    address_lines: List[str] = Field(
        default_factory=list, description="Строки '<префектура><муниципалитет><адрес> <группа>'"
    )
    metrics: Dict[str, float] = Field(
        default_factory=dict, description="Метрики разбора (время, пропущенные строки)"
    )

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def line_count(self) -> int:
        return len(self.address_lines)

    def to_text(self) -> str:
        """Текст для записи в файл: каждая строка с завершающим '\\n'."""
        return "".join(f"{line}\n" for line in self.address_lines)


class DocumentReportDTO(BaseModel):
    """Итог обработки одного документа в пакете."""

    file: str = Field(..., description="Имя входного файла")
    status: Literal["success", "failed"]
    output_file: Optional[str] = Field(None, description="Имя созданного файла")
    address_count: int = Field(0, ge=0)
    error: Optional[str] = Field(None, description="Текст ошибки для failed")

    model_config = ConfigDict(frozen=True)


class BatchReportDTO(BaseModel):
    """Статистика пакетной обработки директории."""

    directory: str
    documents: List[DocumentReportDTO] = Field(default_factory=list)

    @computed_field
    @property
    def processed(self) -> int:
        return len(self.documents)

    @computed_field
    @property
    def success(self) -> int:
        return sum(1 for d in self.documents if d.status == "success")

    @computed_field
    @property
    def failed(self) -> int:
        return sum(1 for d in self.documents if d.status == "failed")
