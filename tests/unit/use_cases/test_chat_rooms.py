"""Unit tests for ListRooms, OpenRoom and PostMessage"""

import pytest
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.chat import ListRooms, OpenRoom, PostMessage, PostMessageCommandDTO
from src.domain.chat import ChatRoom, room_key_of
from src.domain.item import Item


def make_room(room_id: int = 1, **overrides) -> ChatRoom:
    values = dict(id=room_id, user1_id="borrower", user2_id="owner", item_id=3)
    values.update(overrides)
    return ChatRoom(**values)


def make_item(**overrides) -> Item:
    values = dict(
        id=3, owner_id="owner", title="Tent", category="camping",
        price_per_day=10000, deposit=50000,
    )
    values.update(overrides)
    return Item(**values)


@pytest.fixture
def mock_chat_repo():
    repo = MagicMock()

    async def create_room(room):
        room.id = 11
        return room

    async def append_message(room, message):
        message.id = 21
        message.room_id = room.id
        room.last_message = message.text
        room.last_message_time = message.created_at
        return message

    repo.create_room = AsyncMock(side_effect=create_room)
    repo.append_message = AsyncMock(side_effect=append_message)
    return repo


@pytest.fixture
def mock_item_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=make_item())
    return repo


@pytest.mark.asyncio
class TestListRooms:
    async def test_returns_rooms_in_repository_order(self, mock_chat_repo):
        now = datetime.utcnow()
        mock_chat_repo.get_rooms_by_user = AsyncMock(
            return_value=[
                make_room(2, last_message="Rental started", last_message_time=now),
                make_room(1, last_message="hello", last_message_time=now - timedelta(hours=1)),
            ]
        )

        result = await ListRooms(mock_chat_repo).execute("owner")

        assert [r.id for r in result.value.rooms] == [2, 1]
        assert result.value.rooms[0].borrower_id == "borrower"
        assert result.value.rooms[0].owner_id == "owner"
        assert result.value.rooms[0].last_message == "Rental started"
        mock_chat_repo.get_rooms_by_user.assert_awaited_once_with("owner")


@pytest.mark.asyncio
class TestOpenRoom:
    async def test_creates_room_with_item_owner(self, mock_uow, mock_chat_repo, mock_item_repo):
        mock_chat_repo.get_room_by_key = AsyncMock(return_value=None)

        result = await OpenRoom(mock_uow, mock_chat_repo, mock_item_repo).execute(3, "borrower")

        assert result.is_ok()
        assert result.value.created is True
        assert result.value.room.id == 11
        mock_chat_repo.get_room_by_key.assert_awaited_once_with(room_key_of("borrower", "owner", 3))
        created = mock_chat_repo.create_room.call_args.args[0]
        assert (created.user1_id, created.user2_id, created.item_id) == ("borrower", "owner", 3)
        mock_uow.commit.assert_called_once()

    async def test_returns_existing_room(self, mock_uow, mock_chat_repo, mock_item_repo):
        mock_chat_repo.get_room_by_key = AsyncMock(return_value=make_room(7))

        result = await OpenRoom(mock_uow, mock_chat_repo, mock_item_repo).execute(3, "borrower")

        assert result.value.created is False
        assert result.value.room.id == 7
        mock_chat_repo.create_room.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_owner_cannot_open_room_with_self(self, mock_uow, mock_chat_repo, mock_item_repo):
        result = await OpenRoom(mock_uow, mock_chat_repo, mock_item_repo).execute(3, "owner")

        assert result.error.code == "INVALID_REQUEST"
        mock_chat_repo.create_room.assert_not_called()

    @pytest.mark.parametrize("item", [None, make_item(is_deleted=True)])
    async def test_unlisted_item(self, mock_uow, mock_chat_repo, mock_item_repo, item):
        mock_item_repo.get_by_id = AsyncMock(return_value=item)

        result = await OpenRoom(mock_uow, mock_chat_repo, mock_item_repo).execute(3, "borrower")

        assert result.error.code == "ITEM_NOT_FOUND"


@pytest.mark.asyncio
class TestPostMessage:
    async def test_participant_posts_and_room_preview_moves(self, mock_uow, mock_chat_repo):
        """
        Given: A room between borrower and owner
        When: The owner posts a message
        Then: The message is stored as a member message and the preview follows it
        """
        room = make_room(1, last_message="Rental started")
        mock_chat_repo.get_room_by_id = AsyncMock(return_value=room)

        result = await PostMessage(mock_uow, mock_chat_repo).execute(
            PostMessageCommandDTO(room_id=1, sender_id="owner", text="  See you at 6  ")
        )

        assert result.is_ok()
        assert result.value.text == "See you at 6"
        assert result.value.sender_id == "owner"
        assert result.value.is_system is False
        assert room.last_message == "See you at 6"
        assert room.last_message_time == result.value.created_at
        mock_uow.commit.assert_called_once()

    async def test_outsider_cannot_post(self, mock_uow, mock_chat_repo):
        mock_chat_repo.get_room_by_id = AsyncMock(return_value=make_room(1))

        result = await PostMessage(mock_uow, mock_chat_repo).execute(
            PostMessageCommandDTO(room_id=1, sender_id="stranger", text="hi")
        )

        assert result.error.code == "ROOM_NOT_FOUND"
        mock_chat_repo.append_message.assert_not_called()
        mock_uow.commit.assert_not_called()

    @pytest.mark.parametrize("text", ["   ", "x" * 2001])
    async def test_rejects_blank_or_oversized_text(self, mock_uow, mock_chat_repo, text):
        mock_chat_repo.get_room_by_id = AsyncMock(return_value=make_room(1))

        result = await PostMessage(mock_uow, mock_chat_repo).execute(
            PostMessageCommandDTO(room_id=1, sender_id="owner", text=text)
        )

        assert result.error.code == "INVALID_REQUEST"
        mock_chat_repo.append_message.assert_not_called()
