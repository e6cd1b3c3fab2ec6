"""
Storage — загрузка и сохранение JSON файлов курсов и пользователей

Каждый файл проверяется JSON Schema контрактом (core.contracts) и затем
строится в pydantic модели. Сохранение пользователей атомарно: запись во
временный файл в том же каталоге и os.replace.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

import structlog
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from fxledger.config import DEFAULT_PIVOT_CURRENCY
from fxledger.core.contracts import validate_fx_rates, validate_users
from fxledger.core.domain.rates import RateTable
from fxledger.core.domain.user import UserDirectory
from fxledger.errors import StorageError

logger = structlog.get_logger(__name__)


def _read_json(path: str | Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise StorageError(str(path), f"unable to parse JSON: {e}") from e
    except OSError as e:
        raise StorageError(str(path), f"unable to read file: {e}") from e


# =============================================================================
# RATES
# =============================================================================


def load_rate_table(
    path: str | Path,
    pivot_currency: str = DEFAULT_PIVOT_CURRENCY,
) -> RateTable:
    """
    Загрузка таблицы курсов из fx_rates.json.

    Args:
        path: путь к файлу
        pivot_currency: код pivot-валюты

    Returns:
        RateTable

    Raises:
        StorageError: Файл недоступен, не JSON или нарушает контракт
    """
    payload = _read_json(path)

    try:
        validate_fx_rates(payload)
        rate_table = RateTable.from_payload(payload, pivot_currency=pivot_currency)
    except (SchemaValidationError, ValidationError, ValueError) as e:
        raise StorageError(str(path), f"invalid rate table: {e}") from e

    logger.debug("rate_table_loaded", path=str(path), currencies=len(rate_table))
    return rate_table


# =============================================================================
# USERS
# =============================================================================


def load_user_directory(path: str | Path) -> UserDirectory:
    """
    Загрузка пользователей из users.json.

    Raises:
        StorageError: Файл недоступен, не JSON или нарушает контракт
    """
    payload = _read_json(path)

    try:
        validate_users(payload)
        directory = UserDirectory.from_payload(payload)
    except (SchemaValidationError, ValidationError, ValueError) as e:
        raise StorageError(str(path), f"invalid users file: {e}") from e

    logger.debug("user_directory_loaded", path=str(path), users=len(directory))
    return directory


def save_user_directory(directory: UserDirectory, path: str | Path) -> None:
    """
    Сохранение всей коллекции пользователей (атомарная замена файла).

    Raises:
        StorageError: Если запись не удалась (исходный файл не изменён)
    """
    target = Path(path)
    payload = directory.to_payload()

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp_name, target)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
    except OSError as e:
        raise StorageError(str(path), f"unable to write users: {e}") from e

    logger.debug("user_directory_saved", path=str(path), users=len(directory))
