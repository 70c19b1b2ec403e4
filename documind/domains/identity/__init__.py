from documind.domains.identity.entities import User
from documind.domains.identity.schemas import UserCreate, UserResponse

__all__ = [
    "User",
    "UserCreate", "UserResponse",
]
