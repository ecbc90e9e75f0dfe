"""Wallet API Routes"""

from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.wallet_request import TopUpRequestSchema, WithdrawRequestSchema
from src.app.services.ledger_service import LedgerService
from src.app.use_cases.wallet import (
    GetWallet,
    TopUpWallet,
    WithdrawWallet,
    TopUpCommandDTO,
    WithdrawCommandDTO,
    TransactionDTO,
    WalletResponseDTO,
)
from src.adapter.repositories import SqlAlchemyUserRepository, SqlAlchemyWalletTransactionRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_actor_id
from src.api.error import ClientError

router = APIRouter(prefix="/wallet", tags=["Wallet"])


def _ledger(session: AsyncSession) -> LedgerService:
    return LedgerService(
        SqlAlchemyUserRepository(session),
        SqlAlchemyWalletTransactionRepository(session),
    )


@router.get("", response_model=WalletResponseDTO)
async def get_wallet(
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    actor_id: str = Depends(get_actor_id),
    session: AsyncSession = Depends(get_session),
):
    """Balance and transaction history of the caller, newest first"""
    use_case = GetWallet(
        SqlAlchemyUserRepository(session),
        SqlAlchemyWalletTransactionRepository(session),
    )
    result = await use_case.execute(actor_id, limit=limit, offset=offset)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post("/topup", response_model=TransactionDTO)
async def top_up(
    request: TopUpRequestSchema,
    actor_id: str = Depends(get_actor_id),
    session: AsyncSession = Depends(get_session),
):
    amount = request.amount or ApplicationConfig.DEFAULT_TOPUP_AMOUNT
    use_case = TopUpWallet(SqlAlchemyUnitOfWork(session), _ledger(session))
    result = await use_case.execute(TopUpCommandDTO(user_id=actor_id, amount=amount))
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post("/withdraw", response_model=TransactionDTO)
async def withdraw(
    request: WithdrawRequestSchema,
    actor_id: str = Depends(get_actor_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Withdraw from the caller's wallet.

    **Returns:**
    - 200: Withdrawal recorded
    - 402: Balance too low
    """
    use_case = WithdrawWallet(SqlAlchemyUnitOfWork(session), _ledger(session))
    result = await use_case.execute(WithdrawCommandDTO(user_id=actor_id, amount=request.amount))
    if result.is_err():
        raise ClientError(result.error)
    return result.value
