"""
Domain слой домена Conversion.

Содержит интерфейсы (абстрактные классы) и исключения.
"""

from .interfaces import ILineExtractor, IAddressListConverter

from .exceptions import (
    ConversionError,
    ConversionFormatError,
    FormatViolationError,
    GroupNumberFormatError,
    TextExtractionError,
    ConversionConfigurationError,
    ConversionFileSystemError,
    ConversionFileNotFoundError,
    ConversionFileWriteError,
)

__all__ = [
    # Интерфейсы
    "ILineExtractor",
    "IAddressListConverter",

    # Исключения
    "ConversionError",
    "ConversionFormatError",
    "FormatViolationError",
    "GroupNumberFormatError",
    "TextExtractionError",
    "ConversionConfigurationError",
    "ConversionFileSystemError",
    "ConversionFileNotFoundError",
    "ConversionFileWriteError",
]
