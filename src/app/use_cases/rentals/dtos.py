"""Data Transfer Objects for Rental Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime, date
from typing import List
from pydantic import BaseModel, Field
from src.domain.rental import Rental, RentalStatus


class CreateRentalCommandDTO(BaseModel):
    """
    Command DTO for requesting a rental

    Used as input to CreateRental use case.
    """

    borrower_id: str = Field(..., description="User requesting the rental")

    item_id: int = Field(..., description="Item to rent")

    days: int = Field(..., description="Number of rental days (must be >= 1)")

    is_delivery: bool = Field(default=False, description="Request delivery by the owner")

    class Config:
        json_schema_extra = {
            "example": {
                "borrower_id": "6b1e2c1a-2f7e-4d55-9a51-0b1f9a8f3c10",
                "item_id": 1,
                "days": 2,
                "is_delivery": False,
            }
        }


class ApplyTransitionCommandDTO(BaseModel):
    """
    Command DTO for moving a rental to its next status

    Used as input to ApplyTransition use case.
    """

    rental_id: int = Field(..., description="Rental to transition")

    target_status: RentalStatus = Field(..., description="Requested next status")

    actor_id: str = Field(..., description="Authenticated user requesting the change")


class RentalResponseDTO(BaseModel):
    """Response DTO for a single rental"""

    id: int
    item_id: int
    borrower_id: str
    owner_id: str
    status: RentalStatus
    start_date: date
    end_date: date
    total_fee: int
    deposit_held: int
    is_delivery: bool
    delivery_fee: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, rental: Rental) -> "RentalResponseDTO":
        return cls(
            id=rental.id,
            item_id=rental.item_id,
            borrower_id=rental.borrower_id,
            owner_id=rental.owner_id,
            status=rental.status,
            start_date=rental.start_date,
            end_date=rental.end_date,
            total_fee=rental.total_fee,
            deposit_held=rental.deposit_held,
            is_delivery=rental.is_delivery,
            delivery_fee=rental.delivery_fee,
            created_at=rental.created_at,
            updated_at=rental.updated_at,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": 3,
                "item_id": 1,
                "borrower_id": "6b1e2c1a-2f7e-4d55-9a51-0b1f9a8f3c10",
                "owner_id": "0f3d8a52-77c4-4e0e-8a7a-1f2e3d4c5b6a",
                "status": "paid",
                "start_date": "2024-01-01",
                "end_date": "2024-01-03",
                "total_fee": 30000,
                "deposit_held": 50000,
                "is_delivery": False,
                "delivery_fee": 0,
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T01:00:00Z",
            }
        }


class ListRentalsResponseDTO(BaseModel):
    """Response DTO for the rentals a user takes part in"""

    rentals: List[RentalResponseDTO] = Field(default_factory=list)
    total: int = 0
