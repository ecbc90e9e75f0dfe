"""Data Transfer Objects for User Use Cases"""

from datetime import datetime
from pydantic import BaseModel, Field
from src.domain.user import User


class SignUpCommandDTO(BaseModel):
    """Command DTO for creating a member account"""

    email: str = Field(..., description="Login email (unique)")

    nickname: str = Field(..., description="Display name")


class SetUserBanCommandDTO(BaseModel):
    """Command DTO for admin moderation"""

    user_id: str = Field(..., description="Member to ban or unban")

    actor_id: str = Field(..., description="Admin performing the change")

    banned: bool = Field(..., description="True to ban, False to reinstate")


class UserResponseDTO(BaseModel):
    """Public view of a member"""

    id: str
    email: str
    nickname: str
    balance: int
    trust_score: float
    is_banned: bool
    is_admin: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponseDTO":
        return cls(
            id=user.id,
            email=user.email,
            nickname=user.nickname,
            balance=user.balance,
            trust_score=user.trust_score,
            is_banned=user.is_banned,
            is_admin=user.is_admin,
            created_at=user.created_at,
        )
