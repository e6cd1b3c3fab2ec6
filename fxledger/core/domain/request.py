"""
ConversionRequest — запрос на конвертацию после токенизации

Запрос — значение, а не сущность: идентичность определяется полями.

amount уже распарсен коллаборатором; None означает, что текст суммы
распарсить не удалось. Отчёт о такой ошибке откладывается до шага
MALFORMED_AMOUNT в цепочке проверок (после проверок валют).
"""

import math
from collections.abc import Sequence
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

# Количество полей в корректной строке: user from to amount
REQUEST_COMPONENT_COUNT: Final[int] = 4


def parse_amount(text: str) -> float | None:
    """
    Парсинг текста суммы.

    Returns:
        float, либо None для нечислового текста и NaN/Inf
    """
    try:
        value = float(text)
    except ValueError:
        return None

    if math.isnan(value) or math.isinf(value):
        return None

    return value


class ConversionRequest(BaseModel):
    """Токенизированный запрос: user_name, from_currency, to_currency, amount."""

    user_name: str = Field("", description="Имя пользователя")
    from_currency: str = Field("", description="Валюта списания")
    to_currency: str = Field("", description="Валюта зачисления")
    amount: float | None = Field(
        None, description="Сумма в from_currency (None — не распарсилась)"
    )
    amount_text: str = Field("", description="Исходный текст суммы")
    component_count: int = Field(
        REQUEST_COMPONENT_COUNT, ge=0, description="Число полей после токенизации"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> "ConversionRequest":
        """
        Построение запроса из токенов строки транзакции.

        При числе токенов != 4 поля остаются пустыми, а component_count
        фиксирует фактическое количество — запрос будет отклонён как
        MALFORMED_REQUEST первой же проверкой.
        """
        if len(tokens) != REQUEST_COMPONENT_COUNT:
            return cls(component_count=len(tokens))

        user_name, from_currency, to_currency, amount_text = tokens
        return cls(
            user_name=user_name,
            from_currency=from_currency,
            to_currency=to_currency,
            amount=parse_amount(amount_text),
            amount_text=amount_text,
        )

    @classmethod
    def of(
        cls,
        user_name: str,
        from_currency: str,
        to_currency: str,
        amount: float | None,
    ) -> "ConversionRequest":
        """Запрос с уже числовой суммой."""
        return cls(
            user_name=user_name,
            from_currency=from_currency,
            to_currency=to_currency,
            amount=amount,
            amount_text="" if amount is None else repr(amount),
        )

    @property
    def is_well_formed(self) -> bool:
        return self.component_count == REQUEST_COMPONENT_COUNT
