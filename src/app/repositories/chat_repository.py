"""Chat Repository Interface

Defines the contract for chat room and message persistence.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.chat import ChatRoom, ChatMessage, ChatRoomKey


class ChatRepository(ABC):
    """Repository interface for ChatRoom and ChatMessage persistence"""

    @abstractmethod
    async def get_room_by_id(self, room_id: int) -> Optional[ChatRoom]:
        pass

    @abstractmethod
    async def get_room_by_key(self, key: ChatRoomKey) -> Optional[ChatRoom]:
        """Find the room for (borrower, owner, item) in either participant order"""
        pass

    @abstractmethod
    async def get_rooms_by_user(self, user_id: str) -> List[ChatRoom]:
        """Rooms the user takes part in, most recently active first"""
        pass

    @abstractmethod
    async def create_room(self, room: ChatRoom) -> ChatRoom:
        pass

    @abstractmethod
    async def append_message(self, room: ChatRoom, message: ChatMessage) -> ChatMessage:
        """Append a message and update the room's last message preview"""
        pass

    @abstractmethod
    async def get_messages(self, room_id: int) -> List[ChatMessage]:
        """Messages of a room in chronological order"""
        pass
