"""ValidationChain — упорядоченная цепочка проверок запроса

Проверки выполняются в фиксированном порядке и прерываются на первой
неудачной: возвращается ровно одна причина отказа, нарушения не
агрегируются. Порядок значим — поздние проверки предполагают, что ранние
уже прошли (например, CHECK 7 использует найденного в CHECK 2 пользователя).

Цепочка — список (проверка → результат), без управления потоком через
исключения.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from fxledger.core.domain.outcome import RejectReason
from fxledger.core.domain.rates import RateTable
from fxledger.core.domain.request import ConversionRequest
from fxledger.core.domain.user import User, UserDirectory

from .checks import (
    Check,
    Check01ComponentCount,
    Check02UserExists,
    Check03SameCurrency,
    Check04CurrencyValidity,
    Check05AmountFormat,
    Check06AmountPositive,
    Check07CurrencyHeld,
    Check08Sufficiency,
    CheckContext,
    CheckResult,
)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ValidationResult:
    """Результат прогона цепочки."""

    passed: bool
    reject_reason: RejectReason | None

    # Пользователь, найденный CHECK 2 (None, если цепочка остановилась раньше)
    user: User | None

    # Результаты выполненных проверок (по порядку, решает последняя)
    check_results: tuple[CheckResult, ...]

    # Детали
    details: str


# =============================================================================
# CHAIN
# =============================================================================


def default_checks() -> list[Check]:
    """Проверки в каноническом порядке."""
    return [
        Check01ComponentCount(),
        Check02UserExists(),
        Check03SameCurrency(),
        Check04CurrencyValidity(),
        Check05AmountFormat(),
        Check06AmountPositive(),
        Check07CurrencyHeld(),
        Check08Sufficiency(),
    ]


class ValidationChain:
    """Цепочка проверок с short-circuit семантикой."""

    def __init__(self, checks: Sequence[Check] | None = None):
        """
        Args:
            checks: проверки (по умолчанию — default_checks())
        """
        self.checks: tuple[Check, ...] = tuple(
            checks if checks is not None else default_checks()
        )

    def validate(
        self,
        request: ConversionRequest,
        user_directory: UserDirectory,
        rate_table: RateTable,
    ) -> ValidationResult:
        """Прогон запроса через цепочку.

        Args:
            request: токенизированный запрос
            user_directory: пользователи (read-only)
            rate_table: курсы (read-only)

        Returns:
            ValidationResult: passed=True, либо первая причина отказа
        """
        context = CheckContext(
            request=request,
            user_directory=user_directory,
            rate_table=rate_table,
        )
        results: list[CheckResult] = []

        for check in self.checks:
            result = check.evaluate(context)
            results.append(result)

            if not result.passed:
                return ValidationResult(
                    passed=False,
                    reject_reason=result.reject_reason,
                    user=context.resolve_user() if request.is_well_formed else None,
                    check_results=tuple(results),
                    details=f"{check.name} failed: {result.details}",
                )

        return ValidationResult(
            passed=True,
            reject_reason=None,
            user=context.resolve_user(),
            check_results=tuple(results),
            details=f"PASS: {len(results)} checks",
        )
