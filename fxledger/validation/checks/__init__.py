"""Checks — отдельные проверки ValidationChain.

Фиксированный порядок:
- CHECK 1: Количество компонентов (MALFORMED_REQUEST)
- CHECK 2: Пользователь существует (USER_NOT_FOUND)
- CHECK 3: Валюты различаются (SAME_CURRENCY)
- CHECK 4: Валюты известны (INVALID_CURRENCY)
- CHECK 5: Сумма распарсилась (MALFORMED_AMOUNT)
- CHECK 6: Сумма > 0 (NON_POSITIVE_AMOUNT)
- CHECK 7: Валюта есть в кошельке (CURRENCY_NOT_HELD)
- CHECK 8: Баланса достаточно (INSUFFICIENT_BALANCE)
"""

from .base import Check, CheckContext, CheckResult
from .check_01_component_count import Check01ComponentCount
from .check_02_user_exists import Check02UserExists
from .check_03_same_currency import Check03SameCurrency
from .check_04_currency_validity import Check04CurrencyValidity
from .check_05_amount_format import Check05AmountFormat
from .check_06_amount_positive import Check06AmountPositive
from .check_07_currency_held import Check07CurrencyHeld
from .check_08_sufficiency import Check08Sufficiency

__all__ = [
    "Check",
    "CheckContext",
    "CheckResult",
    "Check01ComponentCount",
    "Check02UserExists",
    "Check03SameCurrency",
    "Check04CurrencyValidity",
    "Check05AmountFormat",
    "Check06AmountPositive",
    "Check07CurrencyHeld",
    "Check08Sufficiency",
]
