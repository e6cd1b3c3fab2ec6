"""
Тесты для SettlementPipeline

Coverage:
- Сценарии из практики (eur → gbp полным балансом, usd → gbp, недостаток средств)
- Pruning нулевых балансов и сохранение ненулевых
- Идемпотентность отказов (нет дрейфа состояния)
- Трасса состояний RECEIVED → ... → SETTLED/REJECTED
- Фатальные ошибки коллабораторов
"""

import pytest

from fxledger.config import SettlementConfig
from fxledger.core.domain import (
    ConversionRequest,
    Rejected,
    RejectReason,
    Settled,
    SettlementState,
    User,
    UserDirectory,
    Wallet,
)
from fxledger.errors import CollaboratorFault
from fxledger.io import parse_line
from fxledger.settlement import SettlementPipeline


@pytest.fixture
def pipeline():
    return SettlementPipeline(SettlementConfig(pivot_currency="usd"))


# =============================================================================
# SCENARIOS
# =============================================================================


def test_direct_non_pivot_conversion(pipeline, simple_rate_table):
    """eur 88 → gbp: eur удалён, gbp = round(88 * 0.985 * 0.854)"""
    user = User(name="Ali", wallet=Wallet({"eur": 88.0}))
    directory = UserDirectory([user])

    outcome = pipeline.process(
        ConversionRequest.of("Ali", "eur", "gbp", 88.0), simple_rate_table, directory
    )

    assert isinstance(outcome, Settled)
    assert outcome.amount_debited == 88.0
    assert outcome.amount_credited == 74.02
    assert outcome.persist_required is True
    assert user.wallet.root == {"gbp": 74.02}


def test_pivot_to_currency(pipeline, simple_rate_table):
    """usd 40 → gbp: usd удалён, gbp = round(40 * 0.854)"""
    user = User(name="John", wallet=Wallet({"usd": 40.0}))
    directory = UserDirectory([user])

    outcome = pipeline.process(
        ConversionRequest.of("John", "usd", "gbp", 40.0), simple_rate_table, directory
    )

    assert isinstance(outcome, Settled)
    assert outcome.amount_credited == 34.16
    assert user.wallet.root == {"gbp": 34.16}


def test_insufficient_balance(pipeline, simple_rate_table):
    user = User(name="Ali", wallet=Wallet({"eur": 5.0}))
    directory = UserDirectory([user])

    outcome = pipeline.process(
        ConversionRequest.of("Ali", "eur", "gbp", 100.0), simple_rate_table, directory
    )

    assert isinstance(outcome, Rejected)
    assert outcome.reason == RejectReason.INSUFFICIENT_BALANCE
    assert user.wallet.root == {"eur": 5.0}


def test_same_currency(pipeline, rate_table, user_directory):
    outcome = pipeline.process(
        ConversionRequest.of("John", "usd", "usd", 50.0), rate_table, user_directory
    )

    assert isinstance(outcome, Rejected)
    assert outcome.reason == RejectReason.SAME_CURRENCY


# =============================================================================
# WALLET SIZE (полный / частичный / новая валюта)
# =============================================================================


@pytest.mark.parametrize(
    "from_currency,to_currency,amount,size_delta",
    [
        ("eur", "gbp", 88.0, -1),
        ("usd", "gbp", 40.0, -1),
        ("gbp", "usd", 1331.4, -1),
        ("eur", "gbp", 22.5, 0),
        ("eur", "usd", 22.5, 0),
        ("usd", "eur", 20.0, 0),
        ("gbp", "jpy", 22.5, 1),
        ("usd", "jpy", 12.0, 1),
    ],
)
def test_wallet_size_after_settlement(
    pipeline, rate_table, user_directory, john, from_currency, to_currency, amount, size_delta
):
    size_before = len(john.wallet)

    outcome = pipeline.process(
        ConversionRequest.of("John", from_currency, to_currency, amount),
        rate_table,
        user_directory,
    )

    assert isinstance(outcome, Settled)
    assert len(john.wallet) == size_before + size_delta


def test_balances_after_real_rates(pipeline, rate_table, user_directory, john):
    pipeline.process(ConversionRequest.of("John", "eur", "gbp", 88.0), rate_table, user_directory)

    assert john.wallet.root == {"gbp": 1407.7, "usd": 40.0}

    pipeline.process(ConversionRequest.of("John", "gbp", "usd", 1407.7), rate_table, user_directory)

    assert list(john.wallet.root) == ["usd"]
    assert john.wallet.balance_of("usd") == pytest.approx(40.0 + 1407.7 * 1.1704259482983, abs=0.01)


def test_partial_debit_keeps_entry(pipeline, rate_table, user_directory, john):
    pipeline.process(ConversionRequest.of("John", "eur", "gbp", 22.5), rate_table, user_directory)

    assert john.wallet.balance_of("eur") == 65.5
    assert "eur" in john.wallet


def test_later_request_sees_earlier_settlement(pipeline, rate_table, user_directory):
    first = pipeline.process(
        ConversionRequest.of("Ali", "eur", "gbp", 88.0), rate_table, user_directory
    )
    second = pipeline.process(
        ConversionRequest.of("Ali", "eur", "gbp", 1.0), rate_table, user_directory
    )

    assert isinstance(first, Settled)
    assert isinstance(second, Rejected)
    assert second.reason == RejectReason.CURRENCY_NOT_HELD


def test_huge_balance_settles(pipeline, simple_rate_table):
    """eur 1e27 → gbp: квантование не теряет точность на больших суммах"""
    user = User(name="Ali", wallet=Wallet({"eur": 1e27}))
    directory = UserDirectory([user])

    outcome = pipeline.process(
        ConversionRequest.of("Ali", "eur", "gbp", 1e27), simple_rate_table, directory
    )

    assert isinstance(outcome, Settled)
    assert outcome.states[-1] == SettlementState.SETTLED
    assert outcome.amount_debited == 1e27
    assert "eur" not in user.wallet
    assert user.wallet.balance_of("gbp") == pytest.approx(1e27 * 0.985 * 0.854)


def test_trailing_space_line_settles(pipeline, simple_rate_table):
    user = User(name="Ali", wallet=Wallet({"eur": 88.0}))
    directory = UserDirectory([user])

    outcome = pipeline.process(parse_line("Ali eur gbp 10 \n"), simple_rate_table, directory)

    assert isinstance(outcome, Settled)
    assert outcome.amount_debited == 10.0
    assert user.wallet.balance_of("eur") == 78.0


# =============================================================================
# IDEMPOTENT REJECTION
# =============================================================================


@pytest.mark.parametrize(
    "tokens",
    [
        ("Ali", "eur", "gbp"),
        ("Bob", "eur", "gbp", "10"),
        ("Ali", "ppp", "gbp", "10"),
        ("Ali", "eur", "gbp", "abc"),
        ("Ali", "eur", "gbp", "-1"),
        ("Ali", "usd", "gbp", "1"),
        ("Ali", "eur", "gbp", "1000"),
    ],
)
def test_rejection_is_idempotent(pipeline, rate_table, user_directory, tokens):
    before = user_directory.to_payload()
    request = ConversionRequest.from_tokens(tokens)

    outcomes = [pipeline.process(request, rate_table, user_directory) for _ in range(3)]

    assert all(isinstance(o, Rejected) for o in outcomes)
    assert len({o.reason for o in outcomes}) == 1
    assert user_directory.to_payload() == before
    assert len(rate_table) == 4


# =============================================================================
# STATE TRAIL
# =============================================================================


def test_settled_state_trail(pipeline, rate_table, user_directory):
    outcome = pipeline.process(
        ConversionRequest.of("Ali", "eur", "gbp", 1.0), rate_table, user_directory
    )

    assert outcome.states == (
        SettlementState.RECEIVED,
        SettlementState.VALIDATING,
        SettlementState.CONVERTING,
        SettlementState.SETTLING,
        SettlementState.SETTLED,
    )


def test_rejected_state_trail(pipeline, rate_table, user_directory):
    outcome = pipeline.process(
        ConversionRequest.of("Bob", "eur", "gbp", 1.0), rate_table, user_directory
    )

    assert outcome.states == (
        SettlementState.RECEIVED,
        SettlementState.VALIDATING,
        SettlementState.REJECTED,
    )
    assert outcome.user_name == "Bob"


# =============================================================================
# FATAL
# =============================================================================


def test_pivot_mismatch_is_collaborator_fault(rate_table, user_directory):
    pipeline = SettlementPipeline(SettlementConfig(pivot_currency="eur"))

    with pytest.raises(CollaboratorFault):
        pipeline.process(
            ConversionRequest.of("Ali", "eur", "gbp", 1.0), rate_table, user_directory
        )
