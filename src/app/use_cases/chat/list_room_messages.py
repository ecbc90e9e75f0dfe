from libs.result import Result, Return, Error
from src.app.repositories.chat_repository import ChatRepository
from .dtos import ChatMessageDTO, RoomMessagesResponseDTO


class ListRoomMessages:
    """Chronological messages of a room, visible to its two participants only"""

    def __init__(self, chat_repo: ChatRepository):
        self.chat_repo = chat_repo

    async def execute(self, room_id: int, actor_id: str) -> Result[RoomMessagesResponseDTO]:
        room = await self.chat_repo.get_room_by_id(room_id)
        if not room or not room.has_participant(actor_id):
            return Return.err(
                Error(code="ROOM_NOT_FOUND", message=f"Chat room {room_id} not found")
            )

        messages = await self.chat_repo.get_messages(room_id)
        return Return.ok(
            RoomMessagesResponseDTO(
                room_id=room_id,
                messages=[ChatMessageDTO.from_entity(m) for m in messages],
            )
        )
