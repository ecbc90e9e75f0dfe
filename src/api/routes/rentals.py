"""Rental API Routes

FastAPI routes for the rental lifecycle.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.rental_request import CreateRentalRequestSchema, TransitionRequestSchema
from src.app.services import ItemDirectory, LedgerService, NotificationService
from src.app.use_cases.rentals import (
    CreateRental,
    ApplyTransition,
    GetRental,
    ListRentals,
    CreateRentalCommandDTO,
    ApplyTransitionCommandDTO,
    RentalResponseDTO,
    ListRentalsResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyItemRepository,
    SqlAlchemyRentalRepository,
    SqlAlchemyUserRepository,
    SqlAlchemyWalletTransactionRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_actor_id, get_notification_service
from src.api.error import ClientError

router = APIRouter(prefix="/rentals", tags=["Rentals"])


@router.post("", response_model=RentalResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_rental(
    request: CreateRentalRequestSchema,
    actor_id: str = Depends(get_actor_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Request a rental of an item. The caller is the borrower.

    Terms (price, deposit) are copied from the item at this moment.
    No money moves until the borrower pays.

    **Returns:**
    - 201: Rental requested
    - 402: Balance does not cover fee + deposit
    - 404: Item not found
    - 410: Item has been deleted
    """
    use_case = CreateRental(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyRentalRepository(session),
        SqlAlchemyUserRepository(session),
        ItemDirectory(SqlAlchemyItemRepository(session)),
        delivery_fee=ApplicationConfig.DELIVERY_FEE,
    )
    result = await use_case.execute(
        CreateRentalCommandDTO(
            borrower_id=actor_id,
            item_id=request.item_id,
            days=request.days,
            is_delivery=request.is_delivery,
        )
    )

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("", response_model=ListRentalsResponseDTO)
async def list_rentals(
    actor_id: str = Depends(get_actor_id),
    session: AsyncSession = Depends(get_session),
):
    """Rentals where the caller is the borrower or the owner, newest first"""
    result = await ListRentals(SqlAlchemyRentalRepository(session)).execute(actor_id)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/{rental_id}", response_model=RentalResponseDTO)
async def get_rental(
    rental_id: int,
    actor_id: str = Depends(get_actor_id),
    session: AsyncSession = Depends(get_session),
):
    result = await GetRental(SqlAlchemyRentalRepository(session)).execute(rental_id, actor_id)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post("/{rental_id}/status", response_model=RentalResponseDTO)
async def change_rental_status(
    rental_id: int,
    request: TransitionRequestSchema,
    actor_id: str = Depends(get_actor_id),
    session: AsyncSession = Depends(get_session),
    notification_service: NotificationService = Depends(get_notification_service),
):
    """
    Move a rental to its next status.

    Payment (accepted → paid) debits fee + deposit from the borrower.
    Completion (returned → completed) refunds the deposit to the borrower and
    pays the fee to the owner. Each transition posts a system message to the
    rental's chat room after commit.

    **Returns:**
    - 200: Transition applied
    - 401: Caller is not a party to the rental
    - 402: Borrower balance does not cover payment
    - 403: Caller has the wrong role for this transition
    - 404: Rental not found
    - 409: Transition not allowed from the current status, or lost a concurrent update
    """
    user_repo = SqlAlchemyUserRepository(session)
    ledger = LedgerService(user_repo, SqlAlchemyWalletTransactionRepository(session))

    use_case = ApplyTransition(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyRentalRepository(session),
        ledger,
        notification_service=notification_service,
    )
    result = await use_case.execute(
        ApplyTransitionCommandDTO(
            rental_id=rental_id,
            target_status=request.status,
            actor_id=actor_id,
        )
    )

    if result.is_err():
        raise ClientError(result.error)
    return result.value
