"""CHECK 3: Совпадение валют

from_currency и to_currency должны различаться (сравнение регистрозависимое,
как пришло из источника). Иначе — SAME_CURRENCY.
"""

from fxledger.core.domain.outcome import RejectReason

from .base import Check, CheckContext, CheckResult


class Check03SameCurrency(Check):
    name = "same_currency"
    reject_reason = RejectReason.SAME_CURRENCY

    def evaluate(self, context: CheckContext) -> CheckResult:
        request = context.request

        if request.from_currency == request.to_currency:
            return self._fail(
                f"FROM and TO currencies are both '{request.from_currency}'"
            )

        return self._pass(f"{request.from_currency} != {request.to_currency}")
