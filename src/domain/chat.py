"""Chat Domain Entities

Chat rooms attached to a rental negotiation and their append-only messages.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import String, Text
from src.domain.base import BaseModel, BigIntPK

SYSTEM_SENDER_ID = "system"


@dataclass(frozen=True)
class ChatRoomKey:
    """Identifies the room of one (borrower, owner, item) negotiation"""
    borrower_id: str
    owner_id: str
    item_id: int


def room_key_of(borrower_id: str, owner_id: str, item_id: int) -> ChatRoomKey:
    return ChatRoomKey(borrower_id=borrower_id, owner_id=owner_id, item_id=item_id)


class ChatRoom(BaseModel, table=True):
    """
    Chat Room - Conversation between two users about one item

    user1_id is the borrower side, user2_id the owner side.
    """

    __tablename__ = "chat_rooms"
    __table_args__ = (
        Index('ix_chat_rooms_participants', 'user1_id', 'user2_id', 'item_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntPK, primary_key=True, autoincrement=True),
    )

    user1_id: str = Field(foreign_key="users.id")

    user2_id: str = Field(foreign_key="users.id")

    item_id: Optional[int] = Field(default=None, foreign_key="items.id")

    last_message: str = Field(
        default="",
        sa_column=Column(Text, nullable=False, default=""),
    )

    last_message_time: datetime = Field(default_factory=datetime.utcnow)

    created_at: datetime = Field(default_factory=datetime.utcnow)

    def has_participant(self, user_id: str) -> bool:
        return user_id in (self.user1_id, self.user2_id)


class ChatMessage(BaseModel, table=True):
    """Chat Message - Immutable message in a room (system or user authored)"""

    __tablename__ = "chat_messages"
    __table_args__ = (
        Index('ix_chat_messages_room_created', 'room_id', 'created_at'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntPK, primary_key=True, autoincrement=True),
    )

    room_id: int = Field(foreign_key="chat_rooms.id")

    sender_id: str = Field(sa_column=Column(String(64), nullable=False))

    text: str = Field(sa_column=Column(Text, nullable=False))

    is_system: bool = Field(default=False)

    created_at: datetime = Field(default_factory=datetime.utcnow)
