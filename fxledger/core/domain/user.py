"""
User / UserDirectory — владельцы кошельков

User владеет ровно одним Wallet. UserDirectory — упорядоченная коллекция
пользователей с поиском по имени; ядро мутирует кошельки на месте, но
пользователей не создаёт и не удаляет.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import BaseModel, Field

from .wallet import Wallet


# =============================================================================
# USER
# =============================================================================


class User(BaseModel):
    """
    Пользователь: имя и кошелёк.

    JSON: {"name": "John", "wallet": {"eur": 88.0, "usd": 40.0}}
    """

    name: str = Field(..., min_length=1, description="Уникальное имя пользователя")
    wallet: Wallet = Field(default_factory=Wallet, description="Кошелёк пользователя")


# =============================================================================
# USER DIRECTORY
# =============================================================================


class UserDirectory:
    """Коллекция пользователей с поиском по имени (регистрозависимо)."""

    def __init__(self, users: Iterable[User] = ()):
        self._users: list[User] = list(users)

    @classmethod
    def from_payload(cls, payload: Iterable[dict[str, Any]]) -> "UserDirectory":
        """Построение из JSON-массива пользователей."""
        return cls(User.model_validate(entry) for entry in payload)

    def to_payload(self) -> list[dict[str, Any]]:
        """Сериализация всей коллекции в JSON-совместимый список."""
        return [user.model_dump(mode="json") for user in self._users]

    def find(self, name: str) -> User | None:
        """
        Поиск пользователя по имени.

        При дубликатах имени возвращается первый по порядку загрузки.
        """
        for user in self._users:
            if user.name == name:
                return user
        return None

    def add(self, user: User) -> None:
        self._users.append(user)

    @property
    def users(self) -> list[User]:
        return list(self._users)

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)
