"""CreateRental Use Case

Creates a rental request for an item, snapshotting its price and deposit.
"""

import logging
from datetime import datetime, timedelta
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.item_directory import ItemDirectory
from src.app.repositories.rental_repository import RentalRepository
from src.app.repositories.user_repository import UserRepository
from src.app.use_cases.errors import STORAGE_ERRORS, storage_unavailable
from src.domain.rental import Rental, RentalStatus
from .dtos import CreateRentalCommandDTO, RentalResponseDTO

logger = logging.getLogger(__name__)

DEFAULT_DELIVERY_FEE = 3000


class CreateRental:
    """
    Use Case: Borrower requests to rent an item

    Business Rules:
    1. days >= 1
    2. Item must exist and not be deleted
    3. Borrower must exist, not be banned and not own the item
    4. total_fee = price_per_day * days + delivery fee (if delivery)
    5. deposit_held = item deposit, copied at creation
    6. Balance check is advisory only: nothing is debited or reserved here.
       The payment transition is where funds are enforced.

    Flow:
    1. Validate days
    2. Fetch item terms from the directory
    3. Load and validate borrower
    4. Compute fee and advisory balance check
    5. Insert rental with status REQUESTED and commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        rental_repo: RentalRepository,
        user_repo: UserRepository,
        item_directory: ItemDirectory,
        delivery_fee: int = DEFAULT_DELIVERY_FEE,
    ):
        self.uow = uow
        self.rental_repo = rental_repo
        self.user_repo = user_repo
        self.item_directory = item_directory
        self.delivery_fee = delivery_fee

    async def execute(self, command: CreateRentalCommandDTO) -> Result[RentalResponseDTO]:
        if command.days < 1:
            return Return.err(
                Error(
                    code="INVALID_REQUEST",
                    message=f"Rental must last at least 1 day, got {command.days}",
                )
            )

        try:
            # Step 1: Item terms
            terms_result = await self.item_directory.get_active_terms(command.item_id)
            if terms_result.is_err():
                return Return.err(terms_result.error)
            terms = terms_result.value

            # Step 2: Borrower
            borrower = await self.user_repo.get_by_id(command.borrower_id)
            if not borrower:
                return Return.err(
                    Error(
                        code="USER_NOT_FOUND",
                        message=f"User {command.borrower_id} not found",
                    )
                )
            if borrower.is_banned:
                return Return.err(
                    Error(code="USER_BANNED", message="Banned accounts cannot rent items")
                )
            if borrower.id == terms.owner_id:
                return Return.err(
                    Error(code="INVALID_REQUEST", message="You cannot rent your own item")
                )

            # Step 3: Fee snapshot
            delivery_fee = self.delivery_fee if command.is_delivery else 0
            total_fee = terms.price_per_day * command.days + delivery_fee
            required = total_fee + terms.deposit

            # Step 4: Advisory balance check
            if borrower.balance < required:
                return Return.err(
                    Error(
                        code="INSUFFICIENT_FUNDS",
                        message=(
                            f"Insufficient funds. Required: {required}, "
                            f"Available: {borrower.balance}. Top up your wallet and try again"
                        ),
                        reason=f"balance={borrower.balance}, required={required}",
                        details={"required": required, "current": borrower.balance},
                    )
                )

            # Step 5: Insert rental
            start_date = datetime.utcnow().date()
            rental = await self.rental_repo.create(
                Rental(
                    item_id=terms.item_id,
                    borrower_id=borrower.id,
                    owner_id=terms.owner_id,
                    status=RentalStatus.REQUESTED,
                    start_date=start_date,
                    end_date=start_date + timedelta(days=command.days),
                    total_fee=total_fee,
                    deposit_held=terms.deposit,
                    is_delivery=command.is_delivery,
                    delivery_fee=delivery_fee,
                )
            )
            await self.uow.commit()

        except STORAGE_ERRORS as e:
            await self.uow.rollback()
            logger.error(f"Storage unavailable while creating rental: {e}")
            return Return.err(storage_unavailable(e))
        except Exception as e:
            await self.uow.rollback()
            logger.exception("Failed to create rental")
            return Return.err(
                Error(
                    code="CREATE_RENTAL_FAILED",
                    message="Failed to create rental",
                    reason=str(e),
                )
            )

        logger.info(
            f"Rental {rental.id} requested by {rental.borrower_id} for item {rental.item_id}: "
            f"total_fee={rental.total_fee}, deposit={rental.deposit_held}"
        )
        return Return.ok(RentalResponseDTO.from_entity(rental))
