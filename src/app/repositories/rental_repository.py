"""Rental Repository Interface

Defines the contract for rental persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.rental import Rental, RentalStatus


class RentalRepository(ABC):
    """
    Repository interface for Rental persistence

    Rentals are created once and afterwards only their status changes,
    always through compare_and_set_status.
    """

    @abstractmethod
    async def get_by_id(self, rental_id: int, for_update: bool = False) -> Optional[Rental]:
        """
        Retrieve rental by ID

        Args:
            rental_id: Rental ID
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            Rental if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, rental: Rental) -> Rental:
        pass

    @abstractmethod
    async def compare_and_set_status(self, rental: Rental, new_status: RentalStatus) -> bool:
        """
        Move rental to new_status if it still has the status and version it
        was loaded with

        Args:
            rental: Rental as loaded by the caller
            new_status: Target status

        Returns:
            True if the row was updated (rental is refreshed in place),
            False if another writer changed it first
        """
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> List[Rental]:
        """
        Retrieve rentals where the user is borrower or owner, newest first
        """
        pass
