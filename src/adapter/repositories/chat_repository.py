"""SQLAlchemy implementation of ChatRepository"""

from datetime import datetime
from typing import List, Optional
from sqlmodel import select, or_, and_
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.chat_repository import ChatRepository
from src.domain.chat import ChatRoom, ChatMessage, ChatRoomKey


class SqlAlchemyChatRepository(ChatRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_room_by_id(self, room_id: int) -> Optional[ChatRoom]:
        stmt = select(ChatRoom).where(ChatRoom.id == room_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_room_by_key(self, key: ChatRoomKey) -> Optional[ChatRoom]:
        stmt = (
            select(ChatRoom)
            .where(
                ChatRoom.item_id == key.item_id,
                or_(
                    and_(ChatRoom.user1_id == key.borrower_id, ChatRoom.user2_id == key.owner_id),
                    and_(ChatRoom.user1_id == key.owner_id, ChatRoom.user2_id == key.borrower_id),
                ),
            )
            .order_by(ChatRoom.id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_rooms_by_user(self, user_id: str) -> List[ChatRoom]:
        stmt = (
            select(ChatRoom)
            .where(or_(ChatRoom.user1_id == user_id, ChatRoom.user2_id == user_id))
            .order_by(ChatRoom.last_message_time.desc(), ChatRoom.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_room(self, room: ChatRoom) -> ChatRoom:
        self.session.add(room)
        await self.session.flush()
        await self.session.refresh(room)
        return room

    async def append_message(self, room: ChatRoom, message: ChatMessage) -> ChatMessage:
        message.room_id = room.id
        self.session.add(message)

        room.last_message = message.text
        room.last_message_time = message.created_at or datetime.utcnow()
        self.session.add(room)

        await self.session.flush()
        await self.session.refresh(message)
        return message

    async def get_messages(self, room_id: int) -> List[ChatMessage]:
        stmt = (
            select(ChatMessage)
            .where(ChatMessage.room_id == room_id)
            .order_by(ChatMessage.created_at, ChatMessage.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
