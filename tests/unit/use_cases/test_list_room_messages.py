"""Unit tests for ListRoomMessages use case"""

import pytest
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.chat import ListRoomMessages
from src.domain.chat import ChatMessage, ChatRoom, SYSTEM_SENDER_ID


@pytest.fixture
def mock_chat_repo():
    repo = MagicMock()
    repo.get_room_by_id = AsyncMock(
        return_value=ChatRoom(id=1, user1_id="borrower", user2_id="owner", item_id=3)
    )
    now = datetime.utcnow()
    repo.get_messages = AsyncMock(
        return_value=[
            ChatMessage(id=1, room_id=1, sender_id=SYSTEM_SENDER_ID, text="Rental request accepted",
                        is_system=True, created_at=now),
            ChatMessage(id=2, room_id=1, sender_id=SYSTEM_SENDER_ID, text="Rental started",
                        is_system=True, created_at=now + timedelta(seconds=1)),
        ]
    )
    return repo


@pytest.mark.asyncio
class TestListRoomMessages:
    async def test_participant_sees_messages_in_order(self, mock_chat_repo):
        result = await ListRoomMessages(mock_chat_repo).execute(1, "owner")

        assert result.is_ok()
        assert [m.text for m in result.value.messages] == [
            "Rental request accepted",
            "Rental started",
        ]
        assert all(m.is_system for m in result.value.messages)

    async def test_outsider_gets_not_found(self, mock_chat_repo):
        result = await ListRoomMessages(mock_chat_repo).execute(1, "stranger")

        assert result.error.code == "ROOM_NOT_FOUND"
        mock_chat_repo.get_messages.assert_not_called()

    async def test_missing_room(self, mock_chat_repo):
        mock_chat_repo.get_room_by_id = AsyncMock(return_value=None)

        result = await ListRoomMessages(mock_chat_repo).execute(9, "owner")

        assert result.error.code == "ROOM_NOT_FOUND"
