"""Admin API Routes"""

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.admin_request import BanRequestSchema
from src.app.use_cases.users import SetUserBan, SetUserBanCommandDTO, UserResponseDTO
from src.adapter.repositories import SqlAlchemyUserRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_actor_id
from src.api.error import ClientError

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.put("/users/{user_id}/ban", response_model=UserResponseDTO)
async def set_user_ban(
    user_id: str,
    request: BanRequestSchema,
    actor_id: str = Depends(get_actor_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Ban or reinstate a member. Banned members cannot request rentals.

    **Returns:**
    - 200: Updated member
    - 403: Caller is not an admin
    - 404: Member not found
    """
    use_case = SetUserBan(SqlAlchemyUnitOfWork(session), SqlAlchemyUserRepository(session))
    result = await use_case.execute(
        SetUserBanCommandDTO(user_id=user_id, actor_id=actor_id, banned=request.banned)
    )
    if result.is_err():
        raise ClientError(result.error)
    return result.value
