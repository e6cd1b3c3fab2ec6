"""
Runner — batch-обработка файла транзакций

1. Загрузка fx_rates.json и users.json
2. Последовательная обработка строк transactions.txt через SettlementPipeline
3. После каждого SETTLED — сохранение всей коллекции пользователей
4. Одна строка лога на каждый запрос

Фатальные ошибки (StorageError, CollaboratorFault) прерывают прогон.
"""

import argparse
import sys
from dataclasses import dataclass, replace
from typing import Sequence

import structlog

from fxledger.config import RunnerConfig
from fxledger.core.domain.outcome import Outcome, Settled
from fxledger.errors import FxLedgerError
from fxledger.io.storage import load_rate_table, load_user_directory, save_user_directory
from fxledger.io.transactions import iter_requests
from fxledger.logging_config import configure_logging
from fxledger.reporting import render_outcome
from fxledger.settlement.pipeline import SettlementPipeline

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RunSummary:
    """Итоги прогона."""

    processed: int
    settled: int
    rejected: int


def _log_outcome(outcome: Outcome, line_number: int) -> None:
    message = render_outcome(outcome)
    if isinstance(outcome, Settled):
        logger.info(
            message,
            line=line_number,
            user=outcome.user_name,
            from_currency=outcome.from_currency,
            to_currency=outcome.to_currency,
            amount_debited=outcome.amount_debited,
            amount_credited=outcome.amount_credited,
        )
    else:
        logger.error(message, line=line_number, reason=outcome.reason.value)


def run(config: RunnerConfig) -> RunSummary:
    """
    Прогон всех транзакций.

    Args:
        config: пути к файлам и конфигурация ядра

    Returns:
        RunSummary

    Raises:
        FxLedgerError: StorageError / CollaboratorFault — прогон прерван
    """
    pivot = config.settlement.pivot_currency
    rate_table = load_rate_table(config.rates_file, pivot_currency=pivot)
    user_directory = load_user_directory(config.users_file)
    pipeline = SettlementPipeline(config.settlement)

    processed = settled = rejected = 0

    for line_number, request in iter_requests(config.transactions_file):
        outcome = pipeline.process(request, rate_table, user_directory)
        processed += 1

        if isinstance(outcome, Settled):
            settled += 1
            if outcome.persist_required:
                save_user_directory(user_directory, config.users_file)
        else:
            rejected += 1

        _log_outcome(outcome, line_number)

    return RunSummary(processed=processed, settled=settled, rejected=rejected)


# =============================================================================
# CLI
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fxledger",
        description="Process currency conversion transactions against user wallets.",
    )
    parser.add_argument("--rates", help="Path to fx_rates.json")
    parser.add_argument("--users", help="Path to users.json (rewritten after each settlement)")
    parser.add_argument("--transactions", help="Path to transactions.txt")
    parser.add_argument("--pivot", help="Pivot currency code (default: usd)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument("--json-logs", action="store_true", default=None, help="Emit JSON log lines")
    return parser


def config_from_args(args: argparse.Namespace) -> RunnerConfig:
    """Переопределение RunnerConfig (env defaults) аргументами CLI."""
    config = RunnerConfig()
    overrides = {
        "rates_file": args.rates,
        "users_file": args.users,
        "transactions_file": args.transactions,
        "log_level": args.log_level,
        "json_logs": args.json_logs,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})

    if args.pivot:
        config = replace(
            config, settlement=replace(config.settlement, pivot_currency=args.pivot)
        )
    return config


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    configure_logging(config.log_level, config.json_logs)

    logger.info("Starting application...", transactions=config.transactions_file)
    try:
        summary = run(config)
    except FxLedgerError as e:
        logger.critical("Run aborted", error=str(e), error_type=type(e).__name__)
        return 1

    logger.info(
        "All transactions have been processed, and users.json has been updated "
        "for valid transactions.",
        processed=summary.processed,
        settled=summary.settled,
        rejected=summary.rejected,
    )
    logger.info("Shutting down application...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
