"""CHECK 8: Достаточность баланса

Баланс from_currency >= amount. Списание ровно всего баланса допустимо
(запись будет удалена при settlement). Иначе — INSUFFICIENT_BALANCE.
"""

from fxledger.core.domain.outcome import RejectReason

from .base import Check, CheckContext, CheckResult


class Check08Sufficiency(Check):
    """CHECK 8: баланса хватает для списания."""

    name = "sufficiency"
    reject_reason = RejectReason.INSUFFICIENT_BALANCE

    def evaluate(self, context: CheckContext) -> CheckResult:
        request = context.request
        user = context.resolve_user()
        balance = user.wallet.balance_of(request.from_currency) if user else 0.0

        if request.amount is None or balance < request.amount:
            return self._fail(
                f"{request.user_name} has insufficient {request.from_currency}: "
                f"balance={balance}, requested={request.amount}"
            )

        return self._pass(f"balance={balance} >= amount={request.amount}")
