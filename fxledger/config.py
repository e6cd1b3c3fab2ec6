"""
Конфигурация fxledger.

SettlementConfig — параметры ядра (pivot, точность, режим округления).
RunnerConfig — параметры batch-прогона; значения по умолчанию берутся
из переменных окружения FXLEDGER_*.
"""

import os
from dataclasses import dataclass, field
from decimal import ROUND_HALF_EVEN


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_PIVOT_CURRENCY = "usd"

# Точность денежных сумм в кошельке (знаков после запятой)
DEFAULT_DECIMAL_PLACES = 2


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# SETTLEMENT CONFIG
# =============================================================================


@dataclass(frozen=True)
class SettlementConfig:
    """Конфигурация ядра конвертации.

    Округление: ROUND_HALF_EVEN до decimal_places знаков. Округляется и
    сконвертированная сумма, и каждый итоговый баланс — до проверки на ноль.
    """

    pivot_currency: str = field(
        default_factory=lambda: os.environ.get(
            "FXLEDGER_PIVOT_CURRENCY", DEFAULT_PIVOT_CURRENCY
        )
    )
    decimal_places: int = DEFAULT_DECIMAL_PLACES
    rounding: str = ROUND_HALF_EVEN

    def __post_init__(self):
        if not self.pivot_currency:
            raise ValueError("pivot_currency must be a non-empty currency code")
        if self.decimal_places < 0:
            raise ValueError(
                f"decimal_places must be non-negative, got {self.decimal_places}"
            )


# =============================================================================
# RUNNER CONFIG
# =============================================================================


@dataclass(frozen=True)
class RunnerConfig:
    """Конфигурация batch-прогона транзакций."""

    rates_file: str = field(
        default_factory=lambda: os.environ.get(
            "FXLEDGER_RATES_FILE", "data/fx_rates.json"
        )
    )
    users_file: str = field(
        default_factory=lambda: os.environ.get(
            "FXLEDGER_USERS_FILE", "data/users.json"
        )
    )
    transactions_file: str = field(
        default_factory=lambda: os.environ.get(
            "FXLEDGER_TRANSACTIONS_FILE", "data/transactions.txt"
        )
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("FXLEDGER_LOG_LEVEL", "INFO")
    )
    json_logs: bool = field(default_factory=lambda: _env_flag("FXLEDGER_JSON_LOGS"))
    settlement: SettlementConfig = field(default_factory=SettlementConfig)
