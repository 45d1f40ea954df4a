"""
Stage 1: Classification

ЦКП: Тип каждой строки документа.
"""

from .line_classifier import LineClassifier, LineKind, ClassifiedLine

__all__ = [
    "LineClassifier",
    "LineKind",
    "ClassifiedLine",
]
