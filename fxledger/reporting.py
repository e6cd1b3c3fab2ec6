"""
Reporting — рендеринг Outcome в строку лога

Одна строка на запрос: либо детали конверсии, либо конкретная причина
отказа. Форматы сообщений стабильны (по ним грепают логи прогона).
"""

from fxledger.core.domain.outcome import Outcome, Rejected, RejectReason, Settled
from fxledger.core.math.money import format_money

_REJECTION_MESSAGES: dict[RejectReason, str] = {
    RejectReason.MALFORMED_REQUEST: (
        "Skipped Transaction: Transaction does not have exactly 4 components as required."
    ),
    RejectReason.USER_NOT_FOUND: "Skipped Transaction: User called {user} not found.",
    RejectReason.SAME_CURRENCY: (
        "Skipped Transaction: Both the FROM and TO currencies are the same."
    ),
    RejectReason.INVALID_CURRENCY: (
        "Skipped Transaction: One or both of the currencies is invalid."
    ),
    RejectReason.MALFORMED_AMOUNT: (
        "Skipped Transaction: Unable to parse the amount of conversion as a number."
    ),
    RejectReason.NON_POSITIVE_AMOUNT: (
        "Skipped Transaction: Amount to convert is less than or equal to 0."
    ),
    RejectReason.CURRENCY_NOT_HELD: (
        "Skipped Transaction: {user} does not have {from_currency} (FROM currency)."
    ),
    RejectReason.INSUFFICIENT_BALANCE: (
        "Skipped Transaction: {user} has insufficient amount of {from_currency} "
        "(FROM currency)."
    ),
}


def render_settled(outcome: Settled) -> str:
    return (
        f"Valid Transaction: Success! Converted "
        f"{outcome.from_currency}{format_money(outcome.amount_debited)} to "
        f"{outcome.to_currency}{format_money(outcome.amount_credited)} "
        f"for {outcome.user_name}."
    )


def render_rejected(outcome: Rejected) -> str:
    template = _REJECTION_MESSAGES[outcome.reason]
    return template.format(user=outcome.user_name, from_currency=outcome.from_currency)


def render_outcome(outcome: Outcome) -> str:
    """Outcome → человекочитаемое сообщение."""
    if isinstance(outcome, Settled):
        return render_settled(outcome)
    return render_rejected(outcome)
