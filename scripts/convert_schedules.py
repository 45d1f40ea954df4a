#!/usr/bin/env python3
"""
Точка входа: PDF графики плановых отключений -> списки адресов.

Использование:
    # Обработать все PDF из текущей директории
    python scripts/convert_schedules.py

    # Обработать конкретную директорию
    python scripts/convert_schedules.py path/to/pdfs

    # Прервать пакет на первом документе с ошибкой формата
    python scripts/convert_schedules.py path/to/pdfs --fail-fast
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from loguru import logger

from config.settings import LOG_FORMAT, LOG_LEVEL, LOG_LEVELS, validate_config
from outage_addresses.conversion.application import ConversionComponentFactory
from outage_addresses.conversion.domain import ConversionError, ConversionFileNotFoundError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Outage schedule PDF -> address list")
    parser.add_argument("directory", nargs="?", help="Директория с PDF (по умолчанию текущая)")
    parser.add_argument("--fail-fast", action="store_true",
                        help="Прервать обработку при первой ошибке формата документа")
    parser.add_argument("--remove-raw-text", action="store_true",
                        help="Удалять .rawtxt после разбора")
    parser.add_argument("--log-level", default=LOG_LEVEL.upper(), type=str.upper, choices=LOG_LEVELS,
                        help="Уровень логирования")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Главная функция пакетной конвертации."""
    args = parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=args.log_level)

    try:
        validate_config()
    except ValueError as e:
        logger.error(f"Ошибка конфигурации: {e}")
        return 1

    if args.directory:
        target_dir = Path(args.directory)
        logger.info(f"Поиск PDF файлов в: {target_dir.absolute()}")
    else:
        target_dir = Path(".")
        logger.info(f"Директория не указана, поиск PDF в текущей: {target_dir.absolute()}")

    converter = ConversionComponentFactory.create_batch_converter(
        fail_fast=args.fail_fast,
        keep_raw_text=not args.remove_raw_text,
    )

    try:
        report = converter.convert_directory(target_dir)
    except ConversionFileNotFoundError as e:
        logger.error(f"{e}")
        return 1
    except ConversionError as e:
        logger.error(f"Пакетная обработка прервана: {e}")
        return 1

    return 0 if report.failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
