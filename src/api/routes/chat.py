"""Chat API Routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.chat_request import OpenRoomRequestSchema, PostMessageRequestSchema
from src.app.use_cases.chat import (
    ListRoomMessages,
    ListRooms,
    OpenRoom,
    PostMessage,
    PostMessageCommandDTO,
    ChatMessageDTO,
    ChatRoomDTO,
    ChatRoomListResponseDTO,
    RoomMessagesResponseDTO,
)
from src.adapter.repositories import SqlAlchemyChatRepository, SqlAlchemyItemRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_actor_id
from src.api.error import ClientError

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.get("/rooms", response_model=ChatRoomListResponseDTO)
async def list_rooms(
    actor_id: str = Depends(get_actor_id),
    session: AsyncSession = Depends(get_session),
):
    """Rooms of the caller, most recently active first"""
    result = await ListRooms(SqlAlchemyChatRepository(session)).execute(actor_id)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post("/rooms", response_model=ChatRoomDTO)
async def open_room(
    request: OpenRoomRequestSchema,
    response: Response,
    actor_id: str = Depends(get_actor_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Open the room with the owner of an item.

    **Returns:**
    - 201: Room created
    - 200: Room already existed
    - 400: Caller owns the item
    - 404: Item not found
    """
    use_case = OpenRoom(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyChatRepository(session),
        SqlAlchemyItemRepository(session),
    )
    result = await use_case.execute(request.item_id, actor_id)
    if result.is_err():
        raise ClientError(result.error)
    if result.value.created:
        response.status_code = status.HTTP_201_CREATED
    return result.value.room


@router.get("/rooms/{room_id}/messages", response_model=RoomMessagesResponseDTO)
async def list_room_messages(
    room_id: int,
    actor_id: str = Depends(get_actor_id),
    session: AsyncSession = Depends(get_session),
):
    """Messages of a room in chronological order; participants only"""
    result = await ListRoomMessages(SqlAlchemyChatRepository(session)).execute(room_id, actor_id)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post(
    "/rooms/{room_id}/messages",
    response_model=ChatMessageDTO,
    status_code=status.HTTP_201_CREATED,
)
async def post_message(
    room_id: int,
    request: PostMessageRequestSchema,
    actor_id: str = Depends(get_actor_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = PostMessage(SqlAlchemyUnitOfWork(session), SqlAlchemyChatRepository(session))
    result = await use_case.execute(
        PostMessageCommandDTO(room_id=room_id, sender_id=actor_id, text=request.text)
    )
    if result.is_err():
        raise ClientError(result.error)
    return result.value
