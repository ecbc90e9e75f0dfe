"""Request schemas for Item API"""

from typing import Optional
from pydantic import BaseModel, Field


class CreateItemRequestSchema(BaseModel):
    """
    Request schema for listing an item

    The owner is the caller identified by the auth header.
    """

    title: str = Field(..., min_length=1, max_length=200)

    category: str = Field(..., min_length=1, max_length=50)

    price_per_day: int = Field(..., gt=0, description="Price per day (minor units)")

    deposit: int = Field(default=0, ge=0, description="Refundable deposit (minor units)")

    can_deliver: bool = Field(default=False)

    description: Optional[str] = Field(default="")

    class Config:
        json_schema_extra = {
            "example": {
                "title": "4-person tent",
                "category": "camping",
                "price_per_day": 15000,
                "deposit": 50000,
                "can_deliver": True,
                "description": "Waterproof, easy to pitch",
            }
        }
