"""PostMessage Use Case"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.chat_repository import ChatRepository
from src.app.use_cases.errors import STORAGE_ERRORS, storage_unavailable
from src.domain.chat import ChatMessage
from .dtos import ChatMessageDTO, PostMessageCommandDTO

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 2000


class PostMessage:
    """
    Use Case: Post a member message to a room

    Only the two participants can post; to anyone else the room does not
    exist. Members never author system messages. The room's last message
    preview and time move with each post.
    """

    def __init__(self, uow: UnitOfWork, chat_repo: ChatRepository):
        self.uow = uow
        self.chat_repo = chat_repo

    async def execute(self, command: PostMessageCommandDTO) -> Result[ChatMessageDTO]:
        text = command.text.strip()
        if not text or len(text) > MAX_MESSAGE_LENGTH:
            return Return.err(
                Error(
                    code="INVALID_REQUEST",
                    message=f"Message must be 1 to {MAX_MESSAGE_LENGTH} characters",
                )
            )

        try:
            room = await self.chat_repo.get_room_by_id(command.room_id)
            if not room or not room.has_participant(command.sender_id):
                return Return.err(
                    Error(code="ROOM_NOT_FOUND", message=f"Chat room {command.room_id} not found")
                )

            message = await self.chat_repo.append_message(
                room,
                ChatMessage(
                    room_id=room.id,
                    sender_id=command.sender_id,
                    text=text,
                    is_system=False,
                    created_at=datetime.utcnow(),
                ),
            )
            await self.uow.commit()

        except STORAGE_ERRORS as e:
            await self.uow.rollback()
            return Return.err(storage_unavailable(e))
        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Posting to room {command.room_id} failed")
            return Return.err(
                Error(code="POST_MESSAGE_FAILED", message="Failed to post message", reason=str(e))
            )

        return Return.ok(ChatMessageDTO.from_entity(message))
