"""Базовые типы проверок: контекст запроса и результат проверки."""

from dataclasses import dataclass

from fxledger.core.domain.outcome import RejectReason
from fxledger.core.domain.rates import RateTable
from fxledger.core.domain.request import ConversionRequest
from fxledger.core.domain.user import User, UserDirectory


# =============================================================================
# CONTEXT
# =============================================================================


@dataclass(frozen=True)
class CheckContext:
    """Входные данные проверки: запрос и read-only коллабораторы."""

    request: ConversionRequest
    user_directory: UserDirectory
    rate_table: RateTable

    @property
    def pivot_currency(self) -> str:
        return self.rate_table.pivot_currency

    def resolve_user(self) -> User | None:
        return self.user_directory.find(self.request.user_name)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CheckResult:
    """Результат одной проверки."""

    check_name: str
    passed: bool
    reject_reason: RejectReason | None

    # Детали
    details: str


# =============================================================================
# BASE CHECK
# =============================================================================


class Check:
    """Базовый класс проверки: evaluate(context) -> CheckResult.

    Проверки stateless и не мутируют ни запрос, ни коллабораторов.
    """

    name: str = "check"
    reject_reason: RejectReason

    def evaluate(self, context: CheckContext) -> CheckResult:
        raise NotImplementedError

    def _pass(self, details: str) -> CheckResult:
        return CheckResult(
            check_name=self.name,
            passed=True,
            reject_reason=None,
            details=f"PASS: {details}",
        )

    def _fail(self, details: str) -> CheckResult:
        return CheckResult(
            check_name=self.name,
            passed=False,
            reject_reason=self.reject_reason,
            details=details,
        )
