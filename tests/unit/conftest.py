"""Общие фикстуры: таблица курсов (13 Sep 2022) и пользователи Ali / John."""

import pytest

from fxledger.core.domain import CurrencyRate, RateTable, User, UserDirectory, Wallet

QUOTE_DATE = "Tue, 13 Sep 2022 11:55:01 GMT"


def make_rate(code: str, rate: float, inverse_rate: float, name: str = "", numeric: str = "") -> CurrencyRate:
    return CurrencyRate(
        code=code.upper(),
        alpha_code=code.upper(),
        numeric_code=numeric,
        name=name,
        rate=rate,
        inverse_rate=inverse_rate,
        date=QUOTE_DATE,
        acronym=code,
    )


@pytest.fixture
def rate_table() -> RateTable:
    """Курсы против usd (как в fx_rates.json)."""
    return RateTable(
        {
            "eur": make_rate("eur", 0.98535489535028, 1.0148627714936, "Euro", "978"),
            "gbp": make_rate("gbp", 0.85438980693642, 1.1704259482983, "U.K. Pound Sterling", "826"),
            "jpy": make_rate("jpy", 142.32291211472, 0.007026275566888, "Japanese Yen", "392"),
            "aud": make_rate("aud", 1.4537833499222, 0.68786040234504, "Australian Dollar", "036"),
        }
    )


@pytest.fixture
def simple_rate_table() -> RateTable:
    """Упрощённые курсы: eur.inverse_rate=0.985, gbp.rate=0.854 (точные обратные)."""
    return RateTable(
        {
            "eur": make_rate("eur", 1 / 0.985, 0.985),
            "gbp": make_rate("gbp", 0.854, 1 / 0.854),
        }
    )


@pytest.fixture
def ali() -> User:
    return User(
        name="Ali",
        wallet=Wallet({"jpy": 10.0, "aud": 56.4, "eur": 88.0, "gbp": 1331.4}),
    )


@pytest.fixture
def john() -> User:
    return User(
        name="John",
        wallet=Wallet({"eur": 88.0, "gbp": 1331.4, "usd": 40.0}),
    )


@pytest.fixture
def user_directory(ali, john) -> UserDirectory:
    return UserDirectory([ali, john])
