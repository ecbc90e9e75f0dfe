"""OpenRoom Use Case

Starts (or resumes) the conversation between a prospective borrower and the
owner of an item. Rental system messages for the same pair and item land in
this room.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.chat_repository import ChatRepository
from src.app.repositories.item_repository import ItemRepository
from src.app.use_cases.errors import STORAGE_ERRORS, storage_unavailable
from src.domain.chat import ChatRoom, room_key_of
from .dtos import ChatRoomDTO, OpenRoomResultDTO

logger = logging.getLogger(__name__)


class OpenRoom:
    """
    Use Case: Open the chat room about an item

    Business Rules:
    1. The item must be listed (not deleted)
    2. Owners cannot open a room with themselves
    3. At most one room per (borrower, owner, item); an existing room is returned
    """

    def __init__(self, uow: UnitOfWork, chat_repo: ChatRepository, item_repo: ItemRepository):
        self.uow = uow
        self.chat_repo = chat_repo
        self.item_repo = item_repo

    async def execute(self, item_id: int, actor_id: str) -> Result[OpenRoomResultDTO]:
        try:
            item = await self.item_repo.get_by_id(item_id)
            if not item or item.is_deleted:
                return Return.err(
                    Error(code="ITEM_NOT_FOUND", message=f"Item {item_id} not found")
                )
            if item.owner_id == actor_id:
                return Return.err(
                    Error(code="INVALID_REQUEST", message="You cannot open a chat about your own item")
                )

            key = room_key_of(actor_id, item.owner_id, item.id)
            room = await self.chat_repo.get_room_by_key(key)
            if room is not None:
                return Return.ok(OpenRoomResultDTO(room=ChatRoomDTO.from_entity(room), created=False))

            room = await self.chat_repo.create_room(
                ChatRoom(user1_id=key.borrower_id, user2_id=key.owner_id, item_id=key.item_id)
            )
            await self.uow.commit()

        except STORAGE_ERRORS as e:
            await self.uow.rollback()
            return Return.err(storage_unavailable(e))
        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Opening chat room for item {item_id} failed")
            return Return.err(
                Error(code="OPEN_ROOM_FAILED", message="Failed to open chat room", reason=str(e))
            )

        logger.info(f"Chat room {room.id} opened by {actor_id} for item {item_id}")
        return Return.ok(OpenRoomResultDTO(room=ChatRoomDTO.from_entity(room), created=True))
