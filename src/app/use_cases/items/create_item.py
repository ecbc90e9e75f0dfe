"""CreateItem Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.item_repository import ItemRepository
from src.app.repositories.user_repository import UserRepository
from src.app.use_cases.errors import STORAGE_ERRORS, storage_unavailable
from src.domain.item import Item
from .dtos import CreateItemCommandDTO, ItemResponseDTO

logger = logging.getLogger(__name__)


class CreateItem:
    """
    Use Case: List an item for rent

    Business Rules:
    1. Owner must exist and must not be banned
    2. price_per_day > 0, deposit >= 0 (validated by the command DTO)
    """

    def __init__(self, uow: UnitOfWork, item_repo: ItemRepository, user_repo: UserRepository):
        self.uow = uow
        self.item_repo = item_repo
        self.user_repo = user_repo

    async def execute(self, command: CreateItemCommandDTO) -> Result[ItemResponseDTO]:
        try:
            owner = await self.user_repo.get_by_id(command.owner_id)
            if not owner:
                return Return.err(
                    Error(code="USER_NOT_FOUND", message=f"User {command.owner_id} not found")
                )
            if owner.is_banned:
                return Return.err(
                    Error(code="USER_BANNED", message="Banned users cannot list items")
                )

            item = await self.item_repo.create(
                Item(
                    owner_id=command.owner_id,
                    title=command.title,
                    category=command.category,
                    price_per_day=command.price_per_day,
                    deposit=command.deposit,
                    can_deliver=command.can_deliver,
                    description=command.description or "",
                )
            )
            await self.uow.commit()

        except STORAGE_ERRORS as e:
            await self.uow.rollback()
            return Return.err(storage_unavailable(e))
        except Exception as e:
            await self.uow.rollback()
            logger.exception("Item creation failed")
            return Return.err(
                Error(code="CREATE_ITEM_FAILED", message="Failed to create item", reason=str(e))
            )

        logger.info(f"Item {item.id} listed by {command.owner_id}")
        return Return.ok(ItemResponseDTO.from_entity(item))
