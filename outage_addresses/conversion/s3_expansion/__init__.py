"""
Stage 3: Expansion

ЦКП: Итоговые строки адресов.
"""

from .address_expander import AddressExpander

__all__ = ["AddressExpander"]
