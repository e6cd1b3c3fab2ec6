"""CHECK 1: Количество компонентов запроса

Строка транзакции должна состоять ровно из 4 полей:
user, from_currency, to_currency, amount.
Иначе — MALFORMED_REQUEST.
"""

from fxledger.core.domain.outcome import RejectReason
from fxledger.core.domain.request import REQUEST_COMPONENT_COUNT

from .base import Check, CheckContext, CheckResult


class Check01ComponentCount(Check):
    """CHECK 1: ровно 4 компонента."""

    name = "component_count"
    reject_reason = RejectReason.MALFORMED_REQUEST

    def evaluate(self, context: CheckContext) -> CheckResult:
        count = context.request.component_count

        if count != REQUEST_COMPONENT_COUNT:
            return self._fail(
                f"Transaction has {count} components, "
                f"expected exactly {REQUEST_COMPONENT_COUNT}"
            )

        return self._pass(f"{count} components")
