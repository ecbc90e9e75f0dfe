"""SQLAlchemy implementation of WalletTransactionRepository

Transactions are append-only; nothing here updates or deletes a row.
"""

from typing import List, Optional, Tuple
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import func
from src.app.repositories.wallet_transaction_repository import WalletTransactionRepository
from src.domain.wallet_transaction import WalletTransaction


class SqlAlchemyWalletTransactionRepository(WalletTransactionRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, transaction: WalletTransaction) -> WalletTransaction:
        self.session.add(transaction)
        await self.session.flush()
        await self.session.refresh(transaction)
        return transaction

    async def get_by_id(self, transaction_id: int) -> Optional[WalletTransaction]:
        stmt = select(WalletTransaction).where(WalletTransaction.id == transaction_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_id(
        self, user_id: str, limit: int = 20, offset: int = 0
    ) -> Tuple[List[WalletTransaction], int]:
        """
        Page through a user's transactions, newest first

        Returns:
            (transactions on this page, total number of transactions)
        """
        count_stmt = (
            select(func.count())
            .select_from(WalletTransaction)
            .where(WalletTransaction.user_id == user_id)
        )
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(WalletTransaction)
            .where(WalletTransaction.user_id == user_id)
            .order_by(WalletTransaction.created_at.desc(), WalletTransaction.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def get_by_rental_id(self, rental_id: int) -> List[WalletTransaction]:
        stmt = (
            select(WalletTransaction)
            .where(WalletTransaction.related_rental_id == rental_id)
            .order_by(WalletTransaction.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_amount_sum_by_user(self, user_id: str) -> int:
        stmt = select(func.coalesce(func.sum(WalletTransaction.amount), 0)).where(
            WalletTransaction.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
