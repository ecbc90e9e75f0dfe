"""User Repository Interface

Defines the contract for user and wallet balance persistence.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.user import User


class UserRepository(ABC):
    """
    Repository interface for User persistence

    Balance changes go through adjust_balance, which applies a delta in a
    single conditional UPDATE so concurrent debits can never overdraw.
    """

    @abstractmethod
    async def get_by_id(self, user_id: str, for_update: bool = False) -> Optional[User]:
        """
        Retrieve user by ID

        Args:
            user_id: User identifier
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        pass

    @abstractmethod
    async def adjust_balance(self, user_id: str, delta: int) -> Optional[int]:
        """
        Atomically add delta to the user's balance

        Args:
            user_id: User identifier
            delta: Signed amount to add

        Returns:
            New balance, or None if the user is missing or the balance
            would become negative (nothing is changed in that case)
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[User]:
        pass

    @abstractmethod
    async def set_banned(self, user_id: str, banned: bool) -> Optional[User]:
        """Set or clear the ban flag and return the updated user (None if missing)"""
        pass
