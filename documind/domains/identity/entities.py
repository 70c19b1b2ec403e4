from datetime import datetime
from typing import Optional

from documind.core.clock import utcnow


class User:
    """Сущность пользователя домена Identity"""

    def __init__(
        self,
        id: Optional[int],
        email: str,
        name: str,
        created_at: Optional[datetime] = None
    ):
        self.id = id
        self.email = email
        self.name = name
        self.created_at = created_at or utcnow()

    @classmethod
    def create_user(cls, email: str, name: str) -> "User":
        """Создание нового пользователя (идентификатор выдает БД)"""
        return cls(id=None, email=email, name=name)

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email}, name={self.name})"
