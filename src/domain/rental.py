"""Rental Domain Entity

One borrow of one item, tracked through a fixed lifecycle of statuses.
"""

from datetime import datetime, date
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, BigInteger, Date, Integer
from src.domain.base import BaseModel, BigIntPK


class RentalStatus(str, Enum):
    """Rental lifecycle statuses"""
    REQUESTED = "requested"
    ACCEPTED = "accepted"
    PAID = "paid"
    RENTING = "renting"
    RETURNED = "returned"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ActorRole(str, Enum):
    """Role a user plays in a specific rental"""
    OWNER = "owner"
    BORROWER = "borrower"


class Rental(BaseModel, table=True):
    """
    Rental - Borrow agreement between a borrower and an item owner

    Domain Rules:
    - total_fee and deposit_held are snapshotted at creation and never change
    - status only changes through the rental state machine
    - version increments on every status change (compare-and-set guard)
    - borrower_id != owner_id
    - Rentals are never deleted
    """

    __tablename__ = "rentals"
    __table_args__ = (
        CheckConstraint('total_fee > 0', name='rental_fee_positive'),
        CheckConstraint('deposit_held >= 0', name='rental_deposit_non_negative'),
        Index('ix_rentals_borrower_id', 'borrower_id'),
        Index('ix_rentals_owner_id', 'owner_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntPK, primary_key=True, autoincrement=True),
        description="Unique rental identifier (auto-increment)"
    )

    item_id: int = Field(
        foreign_key="items.id",
        description="Rented item"
    )

    borrower_id: str = Field(
        foreign_key="users.id",
        description="User renting the item"
    )

    owner_id: str = Field(
        foreign_key="users.id",
        description="Item owner at creation time"
    )

    status: RentalStatus = Field(
        default=RentalStatus.REQUESTED,
        description="Current lifecycle status"
    )

    start_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="First rental day"
    )

    end_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Return day (start_date + days)"
    )

    total_fee: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="price_per_day * days + delivery_fee (minor units)"
    )

    deposit_held: int = Field(
        default=0,
        sa_column=Column(BigInteger, nullable=False, default=0),
        description="Deposit taken in escrow at payment (minor units)"
    )

    is_delivery: bool = Field(default=False)

    delivery_fee: int = Field(
        default=0,
        sa_column=Column(BigInteger, nullable=False, default=0),
    )

    version: int = Field(
        default=1,
        sa_column=Column(Integer, nullable=False, default=1),
        description="Incremented on each status change"
    )

    created_at: datetime = Field(default_factory=datetime.utcnow)

    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def payment_amount(self) -> int:
        """Amount debited from the borrower when the rental is paid"""
        return self.total_fee + self.deposit_held

    def role_of(self, user_id: str) -> Optional[ActorRole]:
        if user_id == self.owner_id:
            return ActorRole.OWNER
        if user_id == self.borrower_id:
            return ActorRole.BORROWER
        return None

    def is_party(self, user_id: str) -> bool:
        return self.role_of(user_id) is not None
