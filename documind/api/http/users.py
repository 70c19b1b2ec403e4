from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from documind.core.db import get_db
from documind.domains.identity.schemas import UserCreate, UserResponse
from documind.domains.identity.services import IdentityService

router = APIRouter(prefix="/rpc", tags=["users"])


@router.post("/createUser", response_model=UserResponse)
async def create_user(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db)
):
    """Создание пользователя"""
    identity_service = IdentityService(db)
    user = await identity_service.create_user(user_data)
    return UserResponse.model_validate(user)
