"""Chat use cases"""
from .list_room_messages import ListRoomMessages
from .list_rooms import ListRooms
from .open_room import OpenRoom
from .post_message import PostMessage
from .dtos import (
    ChatMessageDTO,
    RoomMessagesResponseDTO,
    ChatRoomDTO,
    ChatRoomListResponseDTO,
    OpenRoomResultDTO,
    PostMessageCommandDTO,
)

__all__ = [
    "ListRoomMessages",
    "ListRooms",
    "OpenRoom",
    "PostMessage",
    "ChatMessageDTO",
    "RoomMessagesResponseDTO",
    "ChatRoomDTO",
    "ChatRoomListResponseDTO",
    "OpenRoomResultDTO",
    "PostMessageCommandDTO",
]
