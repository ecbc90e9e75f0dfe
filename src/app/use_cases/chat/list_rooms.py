from libs.result import Result, Return
from src.app.repositories.chat_repository import ChatRepository
from .dtos import ChatRoomDTO, ChatRoomListResponseDTO


class ListRooms:
    """Rooms the caller takes part in, most recently active first"""

    def __init__(self, chat_repo: ChatRepository):
        self.chat_repo = chat_repo

    async def execute(self, actor_id: str) -> Result[ChatRoomListResponseDTO]:
        rooms = await self.chat_repo.get_rooms_by_user(actor_id)
        return Return.ok(
            ChatRoomListResponseDTO(rooms=[ChatRoomDTO.from_entity(r) for r in rooms])
        )
