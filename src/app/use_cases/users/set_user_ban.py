"""SetUserBan Use Case

Admin moderation: suspends or reinstates a member account.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.user_repository import UserRepository
from src.app.use_cases.errors import STORAGE_ERRORS, storage_unavailable
from .dtos import SetUserBanCommandDTO, UserResponseDTO

logger = logging.getLogger(__name__)


class SetUserBan:
    """
    Use Case: Ban or unban a member

    Business Rules:
    1. Only admins may change the ban flag
    2. Admins cannot ban themselves
    3. The wallet and its history are untouched; a banned member keeps the
       balance and open rentals but cannot request new ones
    """

    def __init__(self, uow: UnitOfWork, user_repo: UserRepository):
        self.uow = uow
        self.user_repo = user_repo

    async def execute(self, command: SetUserBanCommandDTO) -> Result[UserResponseDTO]:
        try:
            actor = await self.user_repo.get_by_id(command.actor_id)
            if not actor or not actor.is_admin:
                return Return.err(
                    Error(code="FORBIDDEN", message="Only admins can ban or unban members")
                )

            if command.banned and command.user_id == actor.id:
                return Return.err(
                    Error(code="INVALID_REQUEST", message="Admins cannot ban themselves")
                )

            user = await self.user_repo.set_banned(command.user_id, command.banned)
            if user is None:
                await self.uow.rollback()
                return Return.err(
                    Error(code="USER_NOT_FOUND", message=f"User {command.user_id} not found")
                )

            await self.uow.commit()

        except STORAGE_ERRORS as e:
            await self.uow.rollback()
            return Return.err(storage_unavailable(e))
        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Changing ban flag of user {command.user_id} failed")
            return Return.err(
                Error(code="SET_USER_BAN_FAILED", message="Failed to update member", reason=str(e))
            )

        logger.info(
            f"User {user.id} {'banned' if user.is_banned else 'unbanned'} by admin {actor.id}"
        )
        return Return.ok(UserResponseDTO.from_entity(user))
