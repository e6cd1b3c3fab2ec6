"""
Rates — таблица курсов валют относительно pivot-валюты

Immutable Pydantic модель CurrencyRate соответствует одной записи
fx_rates.json (формат floatrates: ключ — код валюты в нижнем регистре).

rate — сколько единиц валюты за 1 единицу pivot (pivot → currency)
inverse_rate — сколько единиц pivot за 1 единицу валюты (currency → pivot)

Pivot-валюта в таблице отсутствует: она распознаётся сравнением с
зарезервированным кодом, а не lookup'ом.
"""

from collections.abc import Iterator, Mapping

from pydantic import BaseModel, ConfigDict, Field

from fxledger.config import DEFAULT_PIVOT_CURRENCY


# =============================================================================
# CURRENCY RATE
# =============================================================================


class CurrencyRate(BaseModel):
    """
    Курс одной валюты относительно pivot.

    Метаданные (alpha_code, numeric_code, name, date) переносятся без
    изменений и в конверсии не участвуют.
    """

    code: str = Field(..., min_length=1, description="Код валюты")
    rate: float = Field(..., gt=0, description="Единиц валюты за 1 pivot")
    inverse_rate: float = Field(
        ..., gt=0, alias="inverseRate", description="Единиц pivot за 1 единицу валюты"
    )

    # Метаданные
    alpha_code: str | None = Field(None, alias="alphaCode")
    numeric_code: str | None = Field(None, alias="numericCode")
    name: str | None = Field(None, description="Отображаемое имя валюты")
    date: str | None = Field(None, description="Дата котировки")
    acronym: str | None = Field(None, description="Сокращение валюты")

    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)


# =============================================================================
# RATE TABLE
# =============================================================================


class RateTable:
    """
    Read-only таблица курсов: код валюты → CurrencyRate.

    Ключи регистрозависимы (как пришли из источника).
    """

    def __init__(
        self,
        rates: Mapping[str, CurrencyRate],
        pivot_currency: str = DEFAULT_PIVOT_CURRENCY,
    ):
        """
        Args:
            rates: отображение код → курс
            pivot_currency: зарезервированный код pivot-валюты

        Raises:
            ValueError: Если pivot-валюта присутствует среди записей
        """
        if pivot_currency in rates:
            raise ValueError(
                f"Pivot currency '{pivot_currency}' must not be a rate table entry"
            )

        self._rates: dict[str, CurrencyRate] = dict(rates)
        self.pivot_currency = pivot_currency

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Mapping],
        pivot_currency: str = DEFAULT_PIVOT_CURRENCY,
    ) -> "RateTable":
        """Построение таблицы из JSON-объекта вида {"eur": {...}, ...}."""
        return cls(
            {
                key: CurrencyRate.model_validate(entry)
                for key, entry in payload.items()
            },
            pivot_currency=pivot_currency,
        )

    def lookup(self, code: str) -> CurrencyRate | None:
        """Курс валюты или None, если валюта не котируется."""
        return self._rates.get(code)

    def is_pivot(self, code: str) -> bool:
        return code == self.pivot_currency

    def is_known(self, code: str) -> bool:
        """True, если код — pivot или присутствует в таблице."""
        return self.is_pivot(code) or code in self._rates

    def codes(self) -> list[str]:
        return list(self._rates)

    def __contains__(self, code: object) -> bool:
        return code in self._rates

    def __len__(self) -> int:
        return len(self._rates)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rates)
