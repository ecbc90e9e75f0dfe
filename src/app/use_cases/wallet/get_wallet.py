"""Get Wallet Use Case

Retrieves a user's balance and transaction history.
"""

from libs.result import Result, Return, Error
from src.app.repositories.user_repository import UserRepository
from src.app.repositories.wallet_transaction_repository import WalletTransactionRepository
from .dtos import TransactionDTO, WalletResponseDTO


class GetWallet:
    """
    Get Wallet Use Case

    Read-only projection of the ledger: current balance plus a page of
    transactions ordered by created_at DESC (most recent first).
    """

    def __init__(
        self,
        user_repo: UserRepository,
        transaction_repo: WalletTransactionRepository,
    ):
        self.user_repo = user_repo
        self.transaction_repo = transaction_repo

    async def execute(
        self, user_id: str, limit: int = 20, offset: int = 0
    ) -> Result[WalletResponseDTO]:
        """
        Execute get wallet operation

        Args:
            user_id: Wallet owner
            limit: Maximum number of transactions to return (default 20)
            offset: Number of transactions to skip (default 0)

        Errors:
            USER_NOT_FOUND: No such user
        """
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            return Return.err(
                Error(code="USER_NOT_FOUND", message=f"User {user_id} not found")
            )

        transactions, total = await self.transaction_repo.get_by_user_id(
            user_id=user_id,
            limit=limit,
            offset=offset,
        )

        return Return.ok(
            WalletResponseDTO(
                user_id=user.id,
                balance=user.balance,
                transactions=[TransactionDTO.from_entity(t) for t in transactions],
                total=total,
                limit=limit,
                offset=offset,
            )
        )
