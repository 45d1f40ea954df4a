"""
Инфраструктурный слой домена Conversion.

Содержит экстрактор текста и менеджер файлов.
"""

from .file_manager import ConversionFileManager
from .pdftotext_extractor import PdfToTextExtractor

__all__ = [
    "ConversionFileManager",
    "PdfToTextExtractor",
]
