"""SettlementPipeline — точка входа ядра

Состояния запроса:
    RECEIVED → VALIDATING → {REJECTED | CONVERTING → SETTLING → SETTLED}

Терминальные состояния — REJECTED и SETTLED; повторов нет, отклонённый
запрос вызывающий отбрасывает.

Контракт process():
- Нарушения бизнес-правил никогда не выбрасываются — только Rejected
- Нарушения контрактов коллабораторов → CollaboratorFault (фатально)
- Единственный наблюдаемый побочный эффект — мутация кошелька при SETTLED
"""

import structlog

from fxledger.config import SettlementConfig
from fxledger.core.domain.outcome import (
    Outcome,
    Rejected,
    Settled,
    SettlementState,
)
from fxledger.core.domain.rates import RateTable
from fxledger.core.domain.request import ConversionRequest
from fxledger.core.domain.user import UserDirectory
from fxledger.core.math.conversion import ConversionEngine
from fxledger.errors import CollaboratorFault
from fxledger.validation.chain import ValidationChain

logger = structlog.get_logger(__name__)


class SettlementPipeline:
    """Оркестрация ValidationChain → ConversionEngine → Wallet mutation.

    Pipeline не владеет состоянием: таблица курсов и пользователи передаются
    в каждый вызов process() вызывающим.
    """

    def __init__(
        self,
        config: SettlementConfig | None = None,
        validation_chain: ValidationChain | None = None,
        conversion_engine: ConversionEngine | None = None,
    ):
        """
        Args:
            config: конфигурация (pivot, округление)
            validation_chain: цепочка проверок (default: 8 канонических)
            conversion_engine: движок конверсии (default: из config)
        """
        self.config = config or SettlementConfig()
        self.validation_chain = validation_chain or ValidationChain()
        self.conversion_engine = conversion_engine or ConversionEngine(self.config)

    def process(
        self,
        request: ConversionRequest,
        rate_table: RateTable,
        user_directory: UserDirectory,
    ) -> Outcome:
        """Обработка одного запроса.

        Args:
            request: токенизированный запрос
            rate_table: таблица курсов (read-only)
            user_directory: пользователи (кошелёк мутируется при SETTLED)

        Returns:
            Settled или Rejected

        Raises:
            CollaboratorFault: при нарушении контракта RateTable/UserDirectory
        """
        states: list[SettlementState] = [SettlementState.RECEIVED]

        if rate_table.pivot_currency != self.config.pivot_currency:
            raise CollaboratorFault(
                f"Rate table is quoted against '{rate_table.pivot_currency}', "
                f"pipeline expects '{self.config.pivot_currency}'"
            )

        # 1. Validation
        self._transition(states, SettlementState.VALIDATING, request)
        validation = self.validation_chain.validate(request, user_directory, rate_table)

        if not validation.passed:
            self._transition(states, SettlementState.REJECTED, request)
            return Rejected(
                reason=validation.reject_reason,
                user_name=request.user_name,
                from_currency=request.from_currency,
                to_currency=request.to_currency,
                details=validation.details,
                states=tuple(states),
            )

        user = validation.user
        if user is None:
            raise CollaboratorFault(
                f"User '{request.user_name}' vanished from the directory during validation"
            )

        # 2. Conversion
        self._transition(states, SettlementState.CONVERTING, request)
        amount_credited = self.conversion_engine.convert(
            request.amount,
            request.from_currency,
            request.to_currency,
            rate_table,
        )

        # 3. Settlement (атомарно в пределах кошелька)
        self._transition(states, SettlementState.SETTLING, request)
        user.wallet.apply_conversion(
            from_currency=request.from_currency,
            to_currency=request.to_currency,
            debit_amount=request.amount,
            credit_amount=amount_credited,
            decimal_places=self.config.decimal_places,
            rounding=self.config.rounding,
        )

        self._transition(states, SettlementState.SETTLED, request)
        return Settled(
            user_name=user.name,
            from_currency=request.from_currency,
            to_currency=request.to_currency,
            amount_debited=request.amount,
            amount_credited=amount_credited,
            states=tuple(states),
        )

    def _transition(
        self,
        states: list[SettlementState],
        new_state: SettlementState,
        request: ConversionRequest,
    ) -> None:
        logger.debug(
            "settlement_state_transition",
            previous_state=states[-1].value,
            new_state=new_state.value,
            user=request.user_name,
        )
        states.append(new_state)
