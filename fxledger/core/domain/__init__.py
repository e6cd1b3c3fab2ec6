"""
Domain models and value objects.

Contains the fundamental entities: CurrencyRate/RateTable, Wallet,
User/UserDirectory, ConversionRequest and the Settled/Rejected outcomes.
"""

from fxledger.core.domain.outcome import (
    Outcome,
    Rejected,
    RejectReason,
    Settled,
    SettlementState,
)
from fxledger.core.domain.rates import CurrencyRate, RateTable
from fxledger.core.domain.request import (
    REQUEST_COMPONENT_COUNT,
    ConversionRequest,
    parse_amount,
)
from fxledger.core.domain.user import User, UserDirectory
from fxledger.core.domain.wallet import Wallet

__all__ = [
    # Rates
    "CurrencyRate",
    "RateTable",
    # Wallet / users
    "Wallet",
    "User",
    "UserDirectory",
    # Request
    "REQUEST_COMPONENT_COUNT",
    "ConversionRequest",
    "parse_amount",
    # Outcome
    "Outcome",
    "Settled",
    "Rejected",
    "RejectReason",
    "SettlementState",
]
