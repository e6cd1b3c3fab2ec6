"""
ConversionEngine — конвертация суммы через pivot-валюту

Маршруты:
- to == pivot:   amount * inverse_rate(from)
- from == pivot: amount * rate(to)
- иначе:         amount * inverse_rate(from) * rate(to)  (два шага через pivot)

Прямых кросс-курсов нет: двухшаговый путь через pivot — единственный.
Результат округляется по SettlementConfig до применения к кошельку.
"""

from fxledger.config import SettlementConfig
from fxledger.core.domain.rates import CurrencyRate, RateTable
from fxledger.core.math.money import round_money
from fxledger.errors import CollaboratorFault


class ConversionEngine:
    """Чистая арифметика конверсии (без побочных эффектов)."""

    def __init__(self, config: SettlementConfig | None = None):
        """
        Args:
            config: конфигурация (pivot, точность, режим округления)
        """
        self.config = config or SettlementConfig()

    @property
    def pivot_currency(self) -> str:
        return self.config.pivot_currency

    def convert(
        self,
        amount: float,
        from_currency: str,
        to_currency: str,
        rate_table: RateTable,
    ) -> float:
        """
        Конвертация с округлением до точности кошелька.

        Args:
            amount: сумма в from_currency
            from_currency: исходная валюта (pivot или запись таблицы)
            to_currency: целевая валюта (pivot или запись таблицы)
            rate_table: таблица курсов

        Returns:
            Округлённая сумма в to_currency

        Raises:
            CollaboratorFault: Если курс не найден (валюта уже проверена цепочкой)
        """
        raw = self.convert_unrounded(amount, from_currency, to_currency, rate_table)
        return round_money(raw, self.config.decimal_places, self.config.rounding)

    def convert_unrounded(
        self,
        amount: float,
        from_currency: str,
        to_currency: str,
        rate_table: RateTable,
    ) -> float:
        """Конвертация без округления."""
        pivot = self.config.pivot_currency

        if to_currency == pivot:
            return amount * self._rate_entry(rate_table, from_currency).inverse_rate

        if from_currency == pivot:
            return amount * self._rate_entry(rate_table, to_currency).rate

        amount_in_pivot = amount * self._rate_entry(rate_table, from_currency).inverse_rate
        return amount_in_pivot * self._rate_entry(rate_table, to_currency).rate

    def _rate_entry(self, rate_table: RateTable, code: str) -> CurrencyRate:
        entry = rate_table.lookup(code)
        if entry is None:
            raise CollaboratorFault(
                f"Rate for '{code}' is missing from the rate table "
                f"(pivot '{self.config.pivot_currency}')"
            )
        return entry
