"""CHECK 5: Формат суммы

Текст суммы должен был распарситься в конечное число. Парсинг выполняет
коллаборатор; здесь только отчёт (после проверок валют). Иначе —
MALFORMED_AMOUNT.
"""

from fxledger.core.domain.outcome import RejectReason
from fxledger.core.math.money import is_valid_float

from .base import Check, CheckContext, CheckResult


class Check05AmountFormat(Check):
    name = "amount_format"
    reject_reason = RejectReason.MALFORMED_AMOUNT

    def evaluate(self, context: CheckContext) -> CheckResult:
        request = context.request

        if request.amount is None or not is_valid_float(request.amount):
            return self._fail(
                f"Unable to parse '{request.amount_text}' as an amount"
            )

        return self._pass(f"amount={request.amount}")
