import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from documind.db.repositories.user_repository import UserRepository
from documind.domains.identity.entities import User
from documind.domains.identity.schemas import UserCreate

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис пользователей. Аутентификации нет: демо-пользователь заменяет ее"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repository = UserRepository(session)

    async def create_user(self, user_data: UserCreate) -> User:
        """Создание пользователя; повтор email приводит к ConflictError"""
        user = User.create_user(email=user_data.email, name=user_data.name)
        created = await self.user_repository.create(user)
        logger.info(f"User {created.id} created")
        return created

    async def get_user(self, user_id: int) -> Optional[User]:
        return await self.user_repository.get_by_id(user_id)

    async def ensure_user(self, email: str, name: str) -> User:
        """Возвращает пользователя с этим email, создавая его при отсутствии"""
        user = await self.user_repository.get_by_email(email)
        if user:
            return user
        return await self.create_user(UserCreate(email=email, name=name))
