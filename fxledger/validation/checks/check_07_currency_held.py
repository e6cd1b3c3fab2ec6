"""CHECK 7: Наличие валюты в кошельке

Кошелёк пользователя должен содержать ненулевую запись from_currency.
Для pivot-валюты правило то же: pivot-баланс должен присутствовать в
кошельке. Иначе — CURRENCY_NOT_HELD.
"""

from fxledger.core.domain.outcome import RejectReason

from .base import Check, CheckContext, CheckResult


class Check07CurrencyHeld(Check):
    """CHECK 7: пользователь владеет from_currency."""

    name = "currency_held"
    reject_reason = RejectReason.CURRENCY_NOT_HELD

    def evaluate(self, context: CheckContext) -> CheckResult:
        request = context.request
        user = context.resolve_user()

        if user is None or not user.wallet.holds(request.from_currency):
            return self._fail(
                f"{request.user_name} does not have {request.from_currency}"
            )

        return self._pass(f"{request.user_name} holds {request.from_currency}")
