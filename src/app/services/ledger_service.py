"""Ledger Service

Atomic, auditable movement of money between the platform and a user wallet.
Every balance change is paired with one appended WalletTransaction.
"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.user_repository import UserRepository
from src.app.repositories.wallet_transaction_repository import WalletTransactionRepository
from src.domain.wallet_transaction import WalletTransaction, TransactionType

logger = logging.getLogger(__name__)


class LedgerService:
    """
    Ledger primitives used by wallet and rental use cases

    Business Rules:
    1. Amounts are positive integers; the sign is decided by credit/debit
    2. A debit never overdraws: balance >= amount is required
    3. Balance update and transaction append happen in the caller's unit
       of work, so several ledger calls commit or roll back together
    4. Pessimistic locking: the user row is read with SELECT FOR UPDATE and
       the balance is changed with a conditional UPDATE

    The service never commits. Callers own the transaction boundary.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        transaction_repo: WalletTransactionRepository,
    ):
        self.user_repo = user_repo
        self.transaction_repo = transaction_repo

    async def credit(
        self,
        user_id: str,
        amount: int,
        transaction_type: TransactionType,
        description: str,
        related_rental_id: Optional[int] = None,
    ) -> Result[WalletTransaction]:
        """
        Add amount to a user's balance and record a positive transaction

        Returns:
            Result[WalletTransaction]: The appended transaction or
            INVALID_AMOUNT / USER_NOT_FOUND
        """
        return await self._move(
            user_id, amount, transaction_type, description, related_rental_id, sign=1
        )

    async def debit(
        self,
        user_id: str,
        amount: int,
        transaction_type: TransactionType,
        description: str,
        related_rental_id: Optional[int] = None,
    ) -> Result[WalletTransaction]:
        """
        Take amount from a user's balance and record a negative transaction

        Returns:
            Result[WalletTransaction]: The appended transaction or
            INVALID_AMOUNT / USER_NOT_FOUND / INSUFFICIENT_FUNDS
        """
        return await self._move(
            user_id, amount, transaction_type, description, related_rental_id, sign=-1
        )

    async def _move(
        self,
        user_id: str,
        amount: int,
        transaction_type: TransactionType,
        description: str,
        related_rental_id: Optional[int],
        sign: int,
    ) -> Result[WalletTransaction]:
        if amount <= 0:
            return Return.err(
                Error(
                    code="INVALID_AMOUNT",
                    message=f"Amount must be greater than 0, got {amount}",
                )
            )

        # Step 1: Lock the wallet row
        user = await self.user_repo.get_by_id(user_id, for_update=True)
        if not user:
            return Return.err(
                Error(
                    code="USER_NOT_FOUND",
                    message=f"User {user_id} not found",
                )
            )

        # Step 2: Validate sufficient balance for debits
        if sign < 0 and user.balance < amount:
            return self._insufficient_funds(user_id, required=amount, current=user.balance)

        # Step 3: Apply the delta; refuses to go below zero
        balance_after = await self.user_repo.adjust_balance(user_id, sign * amount)
        if balance_after is None:
            current = await self.user_repo.get_by_id(user_id)
            return self._insufficient_funds(
                user_id, required=amount, current=current.balance if current else 0
            )

        # Step 4: Append the transaction with the balance snapshot
        transaction = await self.transaction_repo.create(
            WalletTransaction(
                user_id=user_id,
                transaction_type=transaction_type,
                amount=sign * amount,
                balance_after=balance_after,
                description=description,
                related_rental_id=related_rental_id,
            )
        )

        logger.info(
            f"Ledger {transaction_type.value} user={user_id} amount={sign * amount} "
            f"balance_after={balance_after} rental={related_rental_id}"
        )
        return Return.ok(transaction)

    @staticmethod
    def _insufficient_funds(user_id: str, required: int, current: int) -> Result[WalletTransaction]:
        logger.warning(
            f"Insufficient funds for user {user_id}: required={required}, current={current}"
        )
        return Return.err(
            Error(
                code="INSUFFICIENT_FUNDS",
                message=f"Insufficient funds. Required: {required}, Available: {current}",
                reason=f"balance={current}, required={required}",
                details={"required": required, "current": current},
            )
        )
