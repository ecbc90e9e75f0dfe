"""Request schemas for User API"""

from pydantic import BaseModel, Field, field_validator


class SignUpRequestSchema(BaseModel):
    """Request schema for POST /users"""

    email: str = Field(..., min_length=3, max_length=255, description="Login email")

    nickname: str = Field(..., min_length=1, max_length=100, description="Display name")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError("email must contain '@'")
        return v
