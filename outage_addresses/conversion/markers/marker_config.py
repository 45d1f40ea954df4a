"""
Marker Config - словарь текстовых маркеров графика отключений.

ЦКП: Загрузка MarkerConfig из YAML файла словаря.

Маркеры:
- group: префикс/суффикс строки с номером группы
- prefecture: скобки вокруг названия префектуры
- municipality: суффиксы муниципалитетов (город/район/посёлок/деревня)
- local_separator_pattern: разделитель адресов
"""

import re
import yaml
from pathlib import Path
from typing import Dict, List, Optional, ClassVar, Pattern
from dataclasses import dataclass, field
from loguru import logger

from ..domain.exceptions import ConversionConfigurationError

DEFAULT_CONFIG_DIR = Path(__file__).parent


@dataclass
class MarkerConfig:
    """
    Словарь маркеров для классификации строк.
    """
    vocabulary: str
    group_prefix: str
    group_suffix: str
    prefecture_prefix: str
    prefecture_suffix: str
    municipality_suffixes: List[str]
    local_separator_pattern: str
    page_number_max_length: int = 2

    _separator_regexp: Optional[Pattern] = field(default=None, init=False, repr=False, compare=False)
    _cache: ClassVar[Dict[str, "MarkerConfig"]] = {}

    def __post_init__(self):
        try:
            separator = re.compile(self.local_separator_pattern)
        except re.error as e:
            raise ConversionConfigurationError(
                message=f"Некорректный local_separator_pattern в словаре {self.vocabulary}",
                component="MarkerConfig",
                original_error=e
            )

        # re.split возвращает захваченные разделители как отдельные фрагменты
        if separator.groups > 0:
            raise ConversionConfigurationError(
                message=(
                    f"local_separator_pattern в словаре {self.vocabulary} не должен содержать "
                    f"захватывающих групп: {self.local_separator_pattern} (используйте (?:...))"
                ),
                component="MarkerConfig"
            )
        self._separator_regexp = separator

    @property
    def separator_regexp(self) -> Pattern:
        return self._separator_regexp

    @classmethod
    def load(cls, vocabulary: str = "ja_JP", config_dir: Optional[Path] = None) -> "MarkerConfig":
        """
        Загружает словарь маркеров из <config_dir>/<vocabulary>.yaml.

        Raises:
            ConversionConfigurationError: Файл не найден или неполный
        """
        config_dir = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR
        cache_key = f"{config_dir}:{vocabulary}"
        if cache_key in cls._cache:
            return cls._cache[cache_key]

        config_file = config_dir / f"{vocabulary}.yaml"
        if not config_file.exists():
            raise ConversionConfigurationError(
                message=f"Словарь маркеров не найден: {config_file}",
                component="MarkerConfig"
            )

        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        config = cls._from_dict(vocabulary, data)
        cls._cache[cache_key] = config

        logger.debug(
            f"[MarkerConfig] Загружен словарь {vocabulary}: "
            f"{len(config.municipality_suffixes)} суффиксов муниципалитетов"
        )
        return config

    @classmethod
    def _from_dict(cls, vocabulary: str, data: dict) -> "MarkerConfig":
        group = data.get("group") or {}
        prefecture = data.get("prefecture") or {}
        municipality = data.get("municipality") or {}

        values = {
            "group.prefix": group.get("prefix"),
            "group.suffix": group.get("suffix"),
            "prefecture.prefix": prefecture.get("prefix"),
            "prefecture.suffix": prefecture.get("suffix"),
            "municipality.suffixes": municipality.get("suffixes"),
            "local_separator_pattern": data.get("local_separator_pattern"),
        }
        missing = [key for key, value in values.items() if not value]
        if missing:
            raise ConversionConfigurationError(
                message=f"В словаре {vocabulary} отсутствуют ключи: {', '.join(missing)}",
                component="MarkerConfig"
            )

        return cls(
            vocabulary=vocabulary,
            group_prefix=values["group.prefix"],
            group_suffix=values["group.suffix"],
            prefecture_prefix=values["prefecture.prefix"],
            prefecture_suffix=values["prefecture.suffix"],
            municipality_suffixes=list(values["municipality.suffixes"]),
            local_separator_pattern=values["local_separator_pattern"],
            page_number_max_length=int(data.get("page_number_max_length", 2)),
        )
