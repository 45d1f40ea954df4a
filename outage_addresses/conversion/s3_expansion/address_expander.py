"""
Address Expander - развёртывание накопленной записи в строки адресов.

ЦКП: "<префектура><муниципалитет><адрес> <группа>" для каждого фрагмента.

Функция без состояния: результат зависит только от входных значений.
"""

from typing import List, Optional
from loguru import logger

from ..markers.marker_config import MarkerConfig


class AddressExpander:
    """
    Развёртывает запись (группа, префектура, муниципалитет, адреса) в строки.
    """

    def __init__(self, config: Optional[MarkerConfig] = None):
        self.config = config or MarkerConfig.load()

    def expand(
        self,
        group_number: Optional[int],
        prefecture: Optional[str],
        municipality: Optional[str],
        local_text: str
    ) -> List[str]:
        """
        Разбивает local_text по разделителю и формирует полные адреса.

        Пустые фрагменты (два разделителя подряд) сохраняются:
        k разделителей дают k+1 строк.

        Args:
            group_number: Номер группы
            prefecture: Префектура
            municipality: Муниципалитет
            local_text: Склеенные фрагменты адресов

        Returns:
            Список строк адресов (пустой, если запись неполная)
        """
        if group_number is None or prefecture is None or municipality is None or not local_text:
            return []

        fragments = self.config.separator_regexp.split(local_text)
        lines = [
            f"{prefecture}{municipality}{fragment.strip()} {group_number}"
            for fragment in fragments
        ]

        logger.debug(
            f"[Expander] {prefecture}{municipality} (группа {group_number}): {len(lines)} адресов"
        )
        return lines
