"""Integration tests for competing rental transitions

Two payments of the same accepted rental must debit the borrower once.
The interleaving is forced deterministically: the first request reads the
rental, then a second request runs to completion before the first writes.
"""

import pytest

from src.adapter.repositories import (
    SqlAlchemyRentalRepository,
    SqlAlchemyUserRepository,
    SqlAlchemyWalletTransactionRepository,
)
from src.adapter.services.notification_service import LoggingNotificationService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.ledger_service import LedgerService
from src.app.use_cases.rentals import ApplyTransition, ApplyTransitionCommandDTO
from src.domain.rental import RentalStatus
from src.domain.wallet_transaction import TransactionType


class InterleavingRentalRepository(SqlAlchemyRentalRepository):
    """Runs a competing request right after the rental has been read"""

    def __init__(self, session, after_read):
        super().__init__(session)
        self.after_read = after_read

    async def get_by_id(self, rental_id, for_update=False):
        rental = await super().get_by_id(rental_id, for_update=for_update)
        if self.after_read is not None:
            hook, self.after_read = self.after_read, None
            await hook()
        return rental


async def prepare_accepted_rental(create_member, create_listing, request_rental, transition, balance):
    owner_id = await create_member("owner@example.com")
    borrower_id = await create_member("borrower@example.com", balance=balance)
    item_id = await create_listing(owner_id, price_per_day=15000, deposit=50000)
    rental_id = (await request_rental(borrower_id, item_id, days=2)).value.id
    assert (await transition(rental_id, RentalStatus.ACCEPTED, owner_id)).is_ok()
    return owner_id, borrower_id, rental_id


@pytest.mark.asyncio
class TestConcurrentPayment:
    async def test_stale_payment_loses_compare_and_set(
        self, create_member, create_listing, request_rental, transition, balance_of, session_factory
    ):
        """
        Given: Accepted rental and a borrower able to pay twice (200000)
        When: A second payment commits between the first one's read and write
        Then: First gets CONFLICT_RETRY, its debit is rolled back, one PAYMENT exists
        """
        # Arrange
        _, borrower_id, rental_id = await prepare_accepted_rental(
            create_member, create_listing, request_rental, transition, balance=200000
        )
        competing = {}

        async def competing_payment():
            competing["result"] = await transition(rental_id, RentalStatus.PAID, borrower_id)

        # Act
        async with session_factory() as session:
            user_repo = SqlAlchemyUserRepository(session)
            result = await ApplyTransition(
                SqlAlchemyUnitOfWork(session),
                InterleavingRentalRepository(session, after_read=competing_payment),
                LedgerService(user_repo, SqlAlchemyWalletTransactionRepository(session)),
                notification_service=LoggingNotificationService(),
            ).execute(
                ApplyTransitionCommandDTO(
                    rental_id=rental_id, target_status=RentalStatus.PAID, actor_id=borrower_id
                )
            )

        # Assert
        assert competing["result"].is_ok()
        assert result.is_err()
        assert result.error.code == "CONFLICT_RETRY"
        assert await balance_of(borrower_id) == 120000

        async with session_factory() as session:
            txns = await SqlAlchemyWalletTransactionRepository(session).get_by_rental_id(rental_id)
            rental = await SqlAlchemyRentalRepository(session).get_by_id(rental_id)
        assert [t.transaction_type for t in txns] == [TransactionType.PAYMENT]
        assert rental.status == RentalStatus.PAID
        assert rental.version == 3

    async def test_second_payment_is_rejected(
        self, create_member, create_listing, request_rental, transition, balance_of, session_factory
    ):
        _, borrower_id, rental_id = await prepare_accepted_rental(
            create_member, create_listing, request_rental, transition, balance=200000
        )

        first = await transition(rental_id, RentalStatus.PAID, borrower_id)
        second = await transition(rental_id, RentalStatus.PAID, borrower_id)

        assert first.is_ok()
        assert second.is_err()
        assert second.error.code == "INVALID_TRANSITION"
        assert await balance_of(borrower_id) == 120000
        async with session_factory() as session:
            txns = await SqlAlchemyWalletTransactionRepository(session).get_by_rental_id(rental_id)
        assert len(txns) == 1
