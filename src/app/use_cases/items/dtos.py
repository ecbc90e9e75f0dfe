"""Data Transfer Objects for Item Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from src.domain.item import Item


class CreateItemCommandDTO(BaseModel):
    """Command DTO for listing an item"""

    owner_id: str = Field(..., description="Listing owner")

    title: str = Field(..., min_length=1, max_length=200)

    category: str = Field(..., min_length=1, max_length=50)

    price_per_day: int = Field(..., gt=0, description="Price per day (minor units)")

    deposit: int = Field(default=0, ge=0, description="Refundable deposit (minor units)")

    can_deliver: bool = Field(default=False)

    description: Optional[str] = Field(default="")


class ItemResponseDTO(BaseModel):
    id: int
    owner_id: str
    title: str
    category: str
    price_per_day: int
    deposit: int
    can_deliver: bool
    description: str
    is_deleted: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, item: Item) -> "ItemResponseDTO":
        return cls(
            id=item.id,
            owner_id=item.owner_id,
            title=item.title,
            category=item.category,
            price_per_day=item.price_per_day,
            deposit=item.deposit,
            can_deliver=item.can_deliver,
            description=item.description,
            is_deleted=item.is_deleted,
            created_at=item.created_at,
        )
