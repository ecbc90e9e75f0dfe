"""Wallet Transaction Repository Interface

Defines the contract for the append-only transaction log.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.wallet_transaction import WalletTransaction


class WalletTransactionRepository(ABC):
    """
    Repository interface for WalletTransaction persistence

    Transactions are immutable and append-only; there is no update or delete.
    """

    @abstractmethod
    async def create(self, transaction: WalletTransaction) -> WalletTransaction:
        pass

    @abstractmethod
    async def get_by_id(self, transaction_id: int) -> Optional[WalletTransaction]:
        pass

    @abstractmethod
    async def get_by_user_id(
        self, user_id: str, limit: int = 20, offset: int = 0
    ) -> Tuple[List[WalletTransaction], int]:
        """
        Retrieve a user's transactions, newest first, with pagination

        Returns:
            Tuple of (transactions page, total count)
        """
        pass

    @abstractmethod
    async def get_by_rental_id(self, rental_id: int) -> List[WalletTransaction]:
        pass

    @abstractmethod
    async def get_amount_sum_by_user(self, user_id: str) -> int:
        """
        Sum of all transaction amounts for a user

        Used by ledger reconciliation; equals the balance when consistent.
        """
        pass
