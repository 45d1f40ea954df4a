"""
Словари текстовых маркеров.
"""

from .marker_config import MarkerConfig

__all__ = ["MarkerConfig"]
