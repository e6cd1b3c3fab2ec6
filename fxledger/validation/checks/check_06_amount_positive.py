"""CHECK 6: Положительность суммы

amount > 0 строго. Иначе — NON_POSITIVE_AMOUNT.
"""

from fxledger.core.domain.outcome import RejectReason

from .base import Check, CheckContext, CheckResult


class Check06AmountPositive(Check):
    name = "amount_positive"
    reject_reason = RejectReason.NON_POSITIVE_AMOUNT

    def evaluate(self, context: CheckContext) -> CheckResult:
        amount = context.request.amount

        if amount is None or amount <= 0:
            return self._fail(f"Amount {amount} is less than or equal to 0")

        return self._pass(f"amount={amount} > 0")
