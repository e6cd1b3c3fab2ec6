"""
Core math: денежное округление и конверсия через pivot-валюту.
"""

from fxledger.core.math.conversion import ConversionEngine
from fxledger.core.math.money import (
    MONEY_DECIMAL_PLACES,
    format_money,
    is_valid_float,
    round_money,
    validate_non_negative,
)

__all__ = [
    "MONEY_DECIMAL_PLACES",
    "ConversionEngine",
    "format_money",
    "is_valid_float",
    "round_money",
    "validate_non_negative",
]
