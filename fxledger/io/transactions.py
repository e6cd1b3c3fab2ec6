"""
Transactions — чтение файла транзакций

Одна строка — одна транзакция: "<user> <from> <to> <amount>".
Токенизация по одиночному пробелу: двойной пробел даёт пустой токен, и
такая строка отклоняется как MALFORMED_REQUEST, а не "чинится".
Хвостовые пустые токены отбрасываются (как у String.split в Java), поэтому
строка с пробелом в конце остаётся валидной.
"""

from collections.abc import Iterator
from pathlib import Path

from fxledger.core.domain.request import ConversionRequest
from fxledger.errors import StorageError

TOKEN_SEPARATOR = " "


def tokenize(line: str) -> tuple[str, ...]:
    """Разбиение строки транзакции на токены (без перевода строки)."""
    tokens = line.rstrip("\r\n").split(TOKEN_SEPARATOR)
    while len(tokens) > 1 and tokens[-1] == "":
        tokens.pop()
    return tuple(tokens)


def parse_line(line: str) -> ConversionRequest:
    """Строка транзакции → ConversionRequest."""
    return ConversionRequest.from_tokens(tokenize(line))


def iter_requests(path: str | Path) -> Iterator[tuple[int, ConversionRequest]]:
    """
    Последовательное чтение запросов из файла.

    Пустые строки пропускаются.

    Yields:
        (номер строки с 1, запрос)

    Raises:
        StorageError: Если файл не удаётся открыть или прочитать
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                yield line_number, parse_line(line)
    except OSError as e:
        raise StorageError(str(path), f"unable to read transactions: {e}") from e
