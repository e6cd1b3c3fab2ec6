"""
Money — денежные примитивы: округление, санитизация float, проверки.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любая сумма, попадающая в кошелёк, предварительно округлена round_money
2. Проверка "баланс равен нулю" выполняется только над округлёнными суммами
3. NaN/Inf никогда не попадают в кошелёк

Округление идёт через Decimal от кратчайшего repr float: 0.125 → "0.125" →
0.12 (HALF_EVEN), а не через бинарное представление 0.1249999...
Это собственная политика проекта: java.text.DecimalFormat округляет точное
бинарное значение и для 1.015 даёт 1.01, здесь получается 1.02.
Точность контекста Decimal растёт вместе с порядком суммы, так что
квантование не падает на больших балансах (1e27 и выше).
"""

import math
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MONEY_DECIMAL_PLACES: Final[int] = 2


# =============================================================================
# NaN/Inf
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, что значение — конечное число (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечно
    """
    return not (math.isnan(value) or math.isinf(value))


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_money(
    value: float,
    decimal_places: int = MONEY_DECIMAL_PLACES,
    rounding: str = ROUND_HALF_EVEN,
) -> float:
    """
    Округление денежной суммы до фиксированного количества знаков.

    Args:
        value: Сумма (float)
        decimal_places: Количество знаков после запятой (default: 2)
        rounding: Режим округления decimal (default: ROUND_HALF_EVEN)

    Returns:
        Округлённая сумма как float

    Raises:
        ValueError: Если value NaN/Inf или decimal_places < 0

    Examples:
        >>> round_money(74.0253)
        74.03
        >>> round_money(0.125)
        0.12
        >>> round_money(88.0 - 88.0)
        0.0
    """
    if not is_valid_float(value):
        raise ValueError(f"Money amount must be finite, got {value}")
    if decimal_places < 0:
        raise ValueError(f"decimal_places must be non-negative, got {decimal_places}")

    quantum = Decimal(1).scaleb(-decimal_places)
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + decimal_places + 2)
        rounded = exact.quantize(quantum, rounding=rounding)

    # -0.0 → 0.0, чтобы ключ не "выживал" как отрицательный ноль
    return float(rounded) + 0.0


def format_money(value: float, decimal_places: int = MONEY_DECIMAL_PLACES) -> str:
    """
    Форматирование суммы без хвостовых нулей (как шаблон "#.##").

    Examples:
        >>> format_money(88.0)
        '88'
        >>> format_money(74.0253)
        '74.03'
        >>> format_money(12.5)
        '12.5'
    """
    text = f"{round_money(value, decimal_places):.{decimal_places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
