"""Request schemas for admin moderation"""

from pydantic import BaseModel, Field


class BanRequestSchema(BaseModel):
    banned: bool = Field(..., description="True to ban the member, False to reinstate")

    class Config:
        json_schema_extra = {"example": {"banned": True}}
