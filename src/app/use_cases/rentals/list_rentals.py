"""List Rentals Use Case

Retrieves every rental a user takes part in, as borrower or as owner.
"""
from libs.result import Result, Return
from src.app.repositories.rental_repository import RentalRepository
from .dtos import ListRentalsResponseDTO, RentalResponseDTO


class ListRentals:
    """
    Use case: rentals of a user, most recent first
    """

    def __init__(self, rental_repo: RentalRepository):
        self.rental_repo = rental_repo

    async def execute(self, user_id: str) -> Result[ListRentalsResponseDTO]:
        rentals = await self.rental_repo.get_by_user_id(user_id)
        return Return.ok(
            ListRentalsResponseDTO(
                rentals=[RentalResponseDTO.from_entity(r) for r in rentals],
                total=len(rentals),
            )
        )
