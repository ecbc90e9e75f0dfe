"""SQLAlchemy implementation of UserRepository

Wallet balances live on the user row; changes go through a conditional
UPDATE so the balance can never be driven below zero.
"""

from datetime import datetime
from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import update
from src.app.repositories.user_repository import UserRepository
from src.domain.user import User


class SqlAlchemyUserRepository(UserRepository):
    """
    SQLAlchemy implementation of UserRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE
    - Atomic guarded balance updates (balance + delta >= 0)
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: str, for_update: bool = False) -> Optional[User]:
        """
        Retrieve user by ID with optional row-level locking

        Args:
            user_id: User identifier
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            User if found, None otherwise
        """
        stmt = select(User).where(User.id == user_id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, user: User) -> User:
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def adjust_balance(self, user_id: str, delta: int) -> Optional[int]:
        """
        Add delta to the balance in a single statement

        Returns:
            The new balance, or None when the row is missing or the
            result would be negative (nothing is changed in that case)
        """
        stmt = (
            update(User)
            .where(User.id == user_id, User.balance + delta >= 0)
            .values(balance=User.balance + delta, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return None

        # Refresh the identity-mapped instance so callers see the new balance
        refreshed = await self.session.execute(
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        return refreshed.scalar_one().balance

    async def get_all(self) -> List[User]:
        stmt = select(User).order_by(User.created_at)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def set_banned(self, user_id: str, banned: bool) -> Optional[User]:
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(is_banned=banned, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return None

        refreshed = await self.session.execute(
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        return refreshed.scalar_one()
