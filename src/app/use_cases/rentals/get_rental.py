"""Get Rental Use Case

Retrieves a single rental for one of its parties.
"""

from libs.result import Result, Return, Error
from src.app.repositories.rental_repository import RentalRepository
from .dtos import RentalResponseDTO


class GetRental:
    """
    Read-only lookup of a rental

    Only the borrower and the owner can see it; anyone else gets
    RENTAL_NOT_FOUND so rental IDs cannot be discovered.
    """

    def __init__(self, rental_repo: RentalRepository):
        self.rental_repo = rental_repo

    async def execute(self, rental_id: int, actor_id: str) -> Result[RentalResponseDTO]:
        rental = await self.rental_repo.get_by_id(rental_id)
        if not rental or not rental.is_party(actor_id):
            return Return.err(
                Error(code="RENTAL_NOT_FOUND", message=f"Rental {rental_id} not found")
            )
        return Return.ok(RentalResponseDTO.from_entity(rental))
