"""
Outcome — результат обработки одного запроса

Settled — конверсия применена к кошельку, вызывающий должен сохранить
состояние (persist_required).
Rejected — запрос отклонён с одной причиной из RejectReason; состояние
не менялось.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================


class RejectReason(str, Enum):
    """Причина отклонения запроса (в порядке проверок)."""

    MALFORMED_REQUEST = "MALFORMED_REQUEST"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    SAME_CURRENCY = "SAME_CURRENCY"
    INVALID_CURRENCY = "INVALID_CURRENCY"
    MALFORMED_AMOUNT = "MALFORMED_AMOUNT"
    NON_POSITIVE_AMOUNT = "NON_POSITIVE_AMOUNT"
    CURRENCY_NOT_HELD = "CURRENCY_NOT_HELD"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"


class SettlementState(str, Enum):
    """
    Состояния запроса в SettlementPipeline.

    RECEIVED → VALIDATING → {REJECTED | CONVERTING → SETTLING → SETTLED}
    """

    RECEIVED = "RECEIVED"
    VALIDATING = "VALIDATING"
    CONVERTING = "CONVERTING"
    SETTLING = "SETTLING"
    SETTLED = "SETTLED"
    REJECTED = "REJECTED"


# =============================================================================
# OUTCOMES
# =============================================================================


class Settled(BaseModel):
    """Успешная конверсия."""

    status: Literal["settled"] = "settled"
    user_name: str
    from_currency: str
    to_currency: str
    amount_debited: float = Field(..., gt=0, description="Списано в from_currency")
    amount_credited: float = Field(..., ge=0, description="Зачислено в to_currency")

    # Сигнал вызывающему: сохранить коллекцию пользователей
    persist_required: bool = True

    states: tuple[SettlementState, ...] = ()

    model_config = ConfigDict(frozen=True)


class Rejected(BaseModel):
    """Отклонённый запрос."""

    status: Literal["rejected"] = "rejected"
    reason: RejectReason

    # Контекст для рендеринга сообщения (может быть пустым при MALFORMED_REQUEST)
    user_name: str = ""
    from_currency: str = ""
    to_currency: str = ""
    details: str = ""

    states: tuple[SettlementState, ...] = ()

    model_config = ConfigDict(frozen=True)


Outcome = Settled | Rejected
