"""SQLAlchemy implementation of RentalRepository

Status changes are compare-and-set on (status, version) so two concurrent
transitions from the same state cannot both win.
"""

from datetime import datetime
from typing import List, Optional
from sqlmodel import select, or_
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import update
from src.app.repositories.rental_repository import RentalRepository
from src.domain.rental import Rental, RentalStatus


class SqlAlchemyRentalRepository(RentalRepository):
    """
    SQLAlchemy implementation of RentalRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE
    - Optimistic compare-and-set on status + version
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, rental_id: int, for_update: bool = False) -> Optional[Rental]:
        """
        Retrieve rental by ID with optional row-level locking

        Args:
            rental_id: Rental ID
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Rental if found, None otherwise
        """
        stmt = select(Rental).where(Rental.id == rental_id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, rental: Rental) -> Rental:
        self.session.add(rental)
        await self.session.flush()
        await self.session.refresh(rental)
        return rental

    async def compare_and_set_status(self, rental: Rental, new_status: RentalStatus) -> bool:
        """
        Move the rental to new_status only if it is still in the status and
        version the caller read

        Returns:
            True if the row was updated, False if another writer got there first
        """
        stmt = (
            update(Rental)
            .where(
                Rental.id == rental.id,
                Rental.status == rental.status,
                Rental.version == rental.version,
            )
            .values(
                status=new_status,
                version=Rental.version + 1,
                updated_at=datetime.utcnow(),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return False

        await self.session.refresh(rental)
        return True

    async def get_by_user_id(self, user_id: str) -> List[Rental]:
        stmt = (
            select(Rental)
            .where(or_(Rental.borrower_id == user_id, Rental.owner_id == user_id))
            .order_by(Rental.created_at.desc(), Rental.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
