"""Settlement — применение провалидированной конверсии к кошельку."""

from .pipeline import SettlementPipeline

__all__ = [
    "SettlementPipeline",
]
