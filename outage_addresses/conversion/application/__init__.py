"""
Application слой домена Conversion.

Содержит фабрику и драйвер пакетной обработки.
"""

from .factory import ConversionComponentFactory
from .batch_converter import BatchConverter

__all__ = [
    "ConversionComponentFactory",
    "BatchConverter",
]
