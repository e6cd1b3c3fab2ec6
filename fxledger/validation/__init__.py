"""Validation — цепочка проверок запроса перед settlement."""

from .chain import ValidationChain, ValidationResult, default_checks

__all__ = [
    "ValidationChain",
    "ValidationResult",
    "default_checks",
]
