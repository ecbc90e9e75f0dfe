"""Notification Service Interface

Defines the contract for posting system messages about rental transitions.
"""

from abc import ABC, abstractmethod
from src.domain.chat import ChatRoomKey


class NotificationService(ABC):
    """
    Abstract sink for system-generated rental messages

    Calls are best effort: implementations report failure through the return
    value and callers never roll back a committed transition because of it.

    Implementations can deliver messages via:
    - The negotiation chat room
    - Logging
    - Webhook (HTTP POST)
    """

    @abstractmethod
    async def emit_system_message(self, room_key: ChatRoomKey, text: str) -> bool:
        """
        Post a system message into the room of a rental negotiation

        Args:
            room_key: (borrower, owner, item) room identity
            text: Message text

        Returns:
            True if the message was delivered, False otherwise
        """
        pass
