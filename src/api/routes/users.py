"""User API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.user_request import SignUpRequestSchema
from src.app.services.ledger_service import LedgerService
from src.app.use_cases.users import SignUpUser, GetUser, SignUpCommandDTO, UserResponseDTO
from src.adapter.repositories import SqlAlchemyUserRepository, SqlAlchemyWalletTransactionRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponseDTO, status_code=status.HTTP_201_CREATED)
async def sign_up(
    request: SignUpRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Create a member account.

    The wallet is opened with the welcome bonus, recorded as a CHARGE
    transaction.

    **Returns:**
    - 201: Account created
    - 409: Email already registered
    """
    user_repo = SqlAlchemyUserRepository(session)
    ledger = LedgerService(user_repo, SqlAlchemyWalletTransactionRepository(session))

    use_case = SignUpUser(
        SqlAlchemyUnitOfWork(session),
        user_repo,
        ledger,
        welcome_bonus=ApplicationConfig.WELCOME_BONUS,
        admin_emails=ApplicationConfig.ADMIN_EMAILS,
    )
    result = await use_case.execute(
        SignUpCommandDTO(email=request.email, nickname=request.nickname)
    )

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/{user_id}", response_model=UserResponseDTO)
async def get_user(user_id: str, session: AsyncSession = Depends(get_session)):
    result = await GetUser(SqlAlchemyUserRepository(session)).execute(user_id)
    if result.is_err():
        raise ClientError(result.error)
    return result.value
