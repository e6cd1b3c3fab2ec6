"""
Wallet — мультивалютный кошелёк пользователя

Отображение код валюты → неотрицательный баланс.

ИНВАРИАНТЫ:
1. Баланс не бывает отрицательным (гарантирует цепочка проверок до мутации;
   при загрузке — model_validator)
2. После любой мутации нет записи с балансом ровно 0 (pruning в той же
   операции, что дала ноль)
3. apply_conversion атомарна: новые балансы считаются до записи
"""

from decimal import ROUND_HALF_EVEN
from typing import Iterator

from pydantic import Field, RootModel, model_validator

from fxledger.core.math.money import (
    MONEY_DECIMAL_PLACES,
    round_money,
    validate_non_negative,
)


class Wallet(RootModel[dict[str, float]]):
    """Кошелёк: {"eur": 88.0, "gbp": 1331.4}."""

    root: dict[str, float] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_balances(self) -> "Wallet":
        """Проверка: все балансы конечны и неотрицательны"""
        for currency, balance in self.root.items():
            validate_non_negative(balance, f"wallet balance for '{currency}'")
        return self

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    def balance_of(self, currency: str) -> float:
        """Баланс валюты (0.0, если валюты нет в кошельке)."""
        return self.root.get(currency, 0.0)

    def holds(self, currency: str) -> bool:
        """True, если в кошельке есть ненулевая запись для валюты."""
        return self.root.get(currency, 0.0) != 0

    def currencies(self) -> list[str]:
        return list(self.root)

    def __contains__(self, currency: object) -> bool:
        return currency in self.root

    def __len__(self) -> int:
        return len(self.root)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    # -------------------------------------------------------------------------
    # Мутации
    # -------------------------------------------------------------------------

    def add_currency(self, currency: str, amount: float) -> None:
        """Прямая установка баланса (фикстуры, начальная загрузка)."""
        validate_non_negative(amount, f"wallet balance for '{currency}'")
        self.root[currency] = amount

    def apply_conversion(
        self,
        from_currency: str,
        to_currency: str,
        debit_amount: float,
        credit_amount: float,
        decimal_places: int = MONEY_DECIMAL_PLACES,
        rounding: str = ROUND_HALF_EVEN,
    ) -> None:
        """
        Settlement конверсии в кошельке.

        1. Credit to_currency на credit_amount (запись создаётся при отсутствии)
        2. Debit from_currency на debit_amount
        3. Если баланс from_currency после округления ровно 0 — запись удаляется

        Оба итоговых баланса вычисляются и округляются до записи в кошелёк:
        ошибка на этапе вычисления не оставляет кошелёк в промежуточном
        состоянии.

        Args:
            from_currency: списываемая валюта
            to_currency: зачисляемая валюта
            debit_amount: сумма списания (в from_currency)
            credit_amount: сумма зачисления (в to_currency, уже сконвертирована)
            decimal_places: точность округления балансов
            rounding: режим округления decimal

        Raises:
            ValueError: Если валюты совпадают или суммы невалидны
        """
        if from_currency == to_currency:
            raise ValueError(
                f"Cannot settle conversion from '{from_currency}' into itself"
            )
        validate_non_negative(debit_amount, "debit_amount")
        validate_non_negative(credit_amount, "credit_amount")

        new_to_balance = round_money(
            self.root.get(to_currency, 0.0) + credit_amount, decimal_places, rounding
        )
        new_from_balance = round_money(
            self.root.get(from_currency, 0.0) - debit_amount, decimal_places, rounding
        )

        self.root[to_currency] = new_to_balance
        self.root[from_currency] = new_from_balance

        if new_from_balance == 0:
            del self.root[from_currency]

        # Зачисление, округлившееся до 0, тоже не оставляет нулевой записи
        if new_to_balance == 0:
            del self.root[to_currency]
