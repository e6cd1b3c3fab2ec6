"""CHECK 2: Существование пользователя

user_name должен находиться в UserDirectory. Иначе — USER_NOT_FOUND.
Последующие проверки полагаются на то, что пользователь уже найден.
"""

from fxledger.core.domain.outcome import RejectReason

from .base import Check, CheckContext, CheckResult


class Check02UserExists(Check):
    """CHECK 2: пользователь существует."""

    name = "user_exists"
    reject_reason = RejectReason.USER_NOT_FOUND

    def evaluate(self, context: CheckContext) -> CheckResult:
        user_name = context.request.user_name

        if context.resolve_user() is None:
            return self._fail(f"User called {user_name} not found")

        return self._pass(f"user={user_name}")
