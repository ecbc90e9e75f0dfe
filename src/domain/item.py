"""Item Domain Entity

A rentable listing and its rental terms.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, BigInteger, String, Text
from src.domain.base import BaseModel, BigIntPK


class Item(BaseModel, table=True):
    """
    Item - Listing offered for rent by its owner

    Domain Rules:
    - price_per_day > 0 and deposit >= 0 (minor units)
    - Terms are copied onto a Rental when it is created, so later edits
      never affect open rentals
    - Deletion is soft (is_deleted); deleted items cannot be rented
    """

    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint('price_per_day > 0', name='item_price_positive'),
        CheckConstraint('deposit >= 0', name='item_deposit_non_negative'),
        Index('ix_items_owner_id', 'owner_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntPK, primary_key=True, autoincrement=True),
        description="Unique item identifier (auto-increment)"
    )

    owner_id: str = Field(
        foreign_key="users.id",
        description="Owner user ID"
    )

    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Listing title"
    )

    category: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Listing category"
    )

    price_per_day: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Rental price per day (minor units)"
    )

    deposit: int = Field(
        default=0,
        sa_column=Column(BigInteger, nullable=False, default=0),
        description="Refundable deposit (minor units)"
    )

    can_deliver: bool = Field(default=False, description="Owner offers delivery")

    description: str = Field(
        default="",
        sa_column=Column(Text, nullable=False, default=""),
        description="Free text description"
    )

    is_deleted: bool = Field(default=False, description="Soft delete flag")

    created_at: datetime = Field(default_factory=datetime.utcnow)

    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "owner_id": "6b1e2c1a-2f7e-4d55-9a51-0b1f9a8f3c10",
                "title": "4-person tent",
                "category": "camping",
                "price_per_day": 15000,
                "deposit": 50000,
                "can_deliver": True,
                "description": "Waterproof, easy to pitch",
                "is_deleted": False,
            }
        }
