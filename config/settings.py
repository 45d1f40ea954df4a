"""
Настройки конвертера графиков плановых отключений.

ВАЖНО: Для извлечения текста нужен pdftotext (poppler-utils)!
Путь к бинарнику можно переопределить через PDFTOTEXT_BINARY.
"""

import os
import shutil

# =============================================================================
# ФАЙЛЫ
# =============================================================================
# Расширение входных файлов (PDF с графиком отключений)
IN_EXTENSION = "pdf"

# Расширение файла с сырым текстом, извлечённым из PDF
TEMP_EXTENSION = "rawtxt"

# Расширение итогового списка адресов
OUT_EXTENSION = "txt"

# Кодировка текстовых файлов
ENCODING = "utf-8"

# =============================================================================
# ВНЕШНИЙ ЭКСТРАКТОР ТЕКСТА
# =============================================================================
PDFTOTEXT_BINARY = os.getenv("PDFTOTEXT_BINARY", "pdftotext")

# =============================================================================
# НАСТРОЙКИ РАЗБОРА
# =============================================================================
# Словарь маркеров (markers/<code>.yaml)
DEFAULT_MARKER_VOCABULARY = "ja_JP"

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | <level>{message}</level>"
)


# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config():
    """Проверяет корректность конфигурации."""
    errors = []

    if not PDFTOTEXT_BINARY:
        errors.append(
            "PDFTOTEXT_BINARY не указан!\n"
            "Укажите путь к pdftotext в config/settings.py или через переменную окружения."
        )
    elif shutil.which(PDFTOTEXT_BINARY) is None:
        errors.append(f"pdftotext не найден: {PDFTOTEXT_BINARY}")

    if errors:
        raise ValueError("\n".join(errors))

    return True
