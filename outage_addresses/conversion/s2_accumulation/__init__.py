"""
Stage 2: Accumulation

ЦКП: Сборка иерархии группа -> префектура -> муниципалитет -> адреса.
"""

from .stage import AccumulationStage, AccumulationResult, ParseState

__all__ = [
    "AccumulationStage",
    "AccumulationResult",
    "ParseState",
]
