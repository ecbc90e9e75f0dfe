"""DeleteItem Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.item_repository import ItemRepository
from src.app.repositories.user_repository import UserRepository
from src.app.use_cases.errors import STORAGE_ERRORS, storage_unavailable

logger = logging.getLogger(__name__)


class DeleteItem:
    """
    Use Case: Soft delete a listing

    Only the owner or an admin may delete. Open rentals keep their copied
    terms and are not affected.
    """

    def __init__(self, uow: UnitOfWork, item_repo: ItemRepository, user_repo: UserRepository):
        self.uow = uow
        self.item_repo = item_repo
        self.user_repo = user_repo

    async def execute(self, item_id: int, actor_id: str) -> Result[None]:
        try:
            item = await self.item_repo.get_by_id(item_id)
            if not item or item.is_deleted:
                return Return.err(
                    Error(code="ITEM_NOT_FOUND", message=f"Item {item_id} not found")
                )

            if item.owner_id != actor_id:
                actor = await self.user_repo.get_by_id(actor_id)
                if not actor or not actor.is_admin:
                    return Return.err(
                        Error(code="FORBIDDEN", message="Only the owner or an admin can delete this item")
                    )

            await self.item_repo.mark_deleted(item_id)
            await self.uow.commit()

        except STORAGE_ERRORS as e:
            await self.uow.rollback()
            return Return.err(storage_unavailable(e))
        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Deleting item {item_id} failed")
            return Return.err(
                Error(code="DELETE_ITEM_FAILED", message="Failed to delete item", reason=str(e))
            )

        logger.info(f"Item {item_id} deleted by {actor_id}")
        return Return.ok(None)
