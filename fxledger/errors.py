"""
Исключения fxledger.

Бизнес-отказы (RejectReason) исключениями НЕ являются — они возвращаются
как значение Rejected. Здесь только фатальные ошибки, прерывающие прогон.
"""


class FxLedgerError(Exception):
    """Базовое исключение fxledger."""


class CollaboratorFault(FxLedgerError):
    """
    Нарушение контракта коллаборатора (RateTable / UserDirectory).

    Пример: курс валюты исчез из таблицы после того, как цепочка проверок
    уже подтвердила его наличие. Такой запрос не "невалиден" — невалидно
    окружение, поэтому это не Rejected, а фатальная ошибка.
    """


class StorageError(FxLedgerError):
    """Ошибка загрузки или сохранения JSON файлов (курсы, пользователи)."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")
