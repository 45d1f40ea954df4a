"""
Исключения для домена Conversion.

Специфичные для разбора графиков отключений ошибки.
"""

from typing import Optional


class ConversionError(Exception):
    """Базовое исключение для ошибок домена Conversion."""

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Conversion Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class ConversionFormatError(ConversionError):
    """Документ не соответствует ожидаемому формату (фатально для документа)."""

    def __init__(
        self,
        message: str,
        line: str = "",
        component: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.line = line
        super().__init__(message, component=component, original_error=original_error)


class FormatViolationError(ConversionFormatError):
    """Строка адреса встретилась до названия муниципалитета."""
    pass


class GroupNumberFormatError(ConversionFormatError):
    """Номер группы не удалось разобрать как целое число."""
    pass


class TextExtractionError(ConversionError):
    """Ошибка внешнего извлечения текста из PDF."""
    pass


class ConversionConfigurationError(ConversionError):
    """Ошибка конфигурации домена Conversion."""
    pass


class ConversionFileSystemError(ConversionError):
    """Ошибка файловой системы в домене Conversion."""
    pass


class ConversionFileNotFoundError(ConversionFileSystemError):
    """Файл или директория не найдены."""
    pass


class ConversionFileWriteError(ConversionFileSystemError):
    """Ошибка чтения/записи файла."""
    pass
