"""Request schemas for Rental API"""

from pydantic import BaseModel, Field
from src.domain.rental import RentalStatus


class CreateRentalRequestSchema(BaseModel):
    """Request schema for POST /rentals"""

    item_id: int = Field(..., description="Item to rent")

    days: int = Field(..., description="Number of rental days")

    is_delivery: bool = Field(default=False)

    class Config:
        json_schema_extra = {
            "example": {"item_id": 1, "days": 3, "is_delivery": False}
        }


class TransitionRequestSchema(BaseModel):
    """Request schema for POST /rentals/{rental_id}/status"""

    status: RentalStatus = Field(..., description="Target status")

    class Config:
        json_schema_extra = {"example": {"status": "accepted"}}
