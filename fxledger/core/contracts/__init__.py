"""
Contract Validation Module

Валидация JSON файлов курсов и пользователей против JSON Schema.
"""

from .validators import (
    ContractValidator,
    RateTableValidator,
    SchemaLoader,
    UsersValidator,
    validate_fx_rates,
    validate_users,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RateTableValidator",
    "UsersValidator",
    # Functions
    "validate_fx_rates",
    "validate_users",
]
