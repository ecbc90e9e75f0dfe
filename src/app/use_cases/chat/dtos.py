"""Data Transfer Objects for Chat Use Cases"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.chat import ChatMessage, ChatRoom


class ChatMessageDTO(BaseModel):
    id: int
    room_id: int
    sender_id: str
    text: str
    is_system: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, message: ChatMessage) -> "ChatMessageDTO":
        return cls(
            id=message.id,
            room_id=message.room_id,
            sender_id=message.sender_id,
            text=message.text,
            is_system=message.is_system,
            created_at=message.created_at,
        )


class RoomMessagesResponseDTO(BaseModel):
    room_id: int
    messages: List[ChatMessageDTO]


class ChatRoomDTO(BaseModel):
    """A negotiation room with its last message preview"""

    id: int
    borrower_id: str
    owner_id: str
    item_id: Optional[int] = None
    last_message: str
    last_message_time: datetime
    created_at: datetime

    @classmethod
    def from_entity(cls, room: ChatRoom) -> "ChatRoomDTO":
        return cls(
            id=room.id,
            borrower_id=room.user1_id,
            owner_id=room.user2_id,
            item_id=room.item_id,
            last_message=room.last_message,
            last_message_time=room.last_message_time,
            created_at=room.created_at,
        )


class ChatRoomListResponseDTO(BaseModel):
    rooms: List[ChatRoomDTO] = Field(default_factory=list)


class OpenRoomResultDTO(BaseModel):
    room: ChatRoomDTO
    created: bool = Field(..., description="False when the room already existed")


class PostMessageCommandDTO(BaseModel):
    room_id: int
    sender_id: str
    text: str = Field(..., description="Message body (1..2000 characters after trimming)")
