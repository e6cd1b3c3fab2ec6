"""CHECK 4: Валидность валют

Каждая из валют должна быть pivot-валютой или записью RateTable.
Проверяется сначала from_currency, затем to_currency; причина отказа
(INVALID_CURRENCY) не различает, какая из них невалидна.
"""

from fxledger.core.domain.outcome import RejectReason

from .base import Check, CheckContext, CheckResult


class Check04CurrencyValidity(Check):
    """CHECK 4: обе валюты известны (pivot или таблица курсов)."""

    name = "currency_validity"
    reject_reason = RejectReason.INVALID_CURRENCY

    def evaluate(self, context: CheckContext) -> CheckResult:
        request = context.request
        rate_table = context.rate_table

        for currency in (request.from_currency, request.to_currency):
            if not rate_table.is_known(currency):
                return self._fail(f"Currency '{currency}' is not quoted")

        return self._pass(
            f"{request.from_currency}, {request.to_currency} quoted "
            f"(pivot={context.pivot_currency})"
        )
