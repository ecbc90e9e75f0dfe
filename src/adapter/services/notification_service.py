"""Notification Service Implementations

Concrete sinks for the system messages emitted after rental transitions.
"""

import logging
from datetime import datetime
from typing import Callable, Optional
import httpx
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.notification_service import NotificationService
from src.adapter.repositories.chat_repository import SqlAlchemyChatRepository
from src.domain.chat import ChatRoom, ChatMessage, ChatRoomKey, SYSTEM_SENDER_ID

logger = logging.getLogger(__name__)


class ChatNotificationService(NotificationService):
    """
    Posts system messages into the negotiation chat room

    Runs in its own session so a delivery failure can never touch the
    rental transaction that already committed. The room is created on
    first use.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self.session_factory = session_factory

    async def emit_system_message(self, room_key: ChatRoomKey, text: str) -> bool:
        try:
            async with self.session_factory() as session:
                chat_repo = SqlAlchemyChatRepository(session)

                room = await chat_repo.get_room_by_key(room_key)
                if room is None:
                    room = await chat_repo.create_room(
                        ChatRoom(
                            user1_id=room_key.borrower_id,
                            user2_id=room_key.owner_id,
                            item_id=room_key.item_id,
                        )
                    )

                await chat_repo.append_message(
                    room,
                    ChatMessage(
                        room_id=room.id,
                        sender_id=SYSTEM_SENDER_ID,
                        text=text,
                        is_system=True,
                        created_at=datetime.utcnow(),
                    ),
                )
                await session.commit()
                return True
        except Exception as e:
            logger.error(f"Failed to post system message to room {room_key}: {e}")
            return False


class LoggingNotificationService(NotificationService):
    """
    Notification service that logs system messages

    Useful for development and testing, or as a fallback.
    """

    async def emit_system_message(self, room_key: ChatRoomKey, text: str) -> bool:
        logger.info(
            f"[RENTAL] Item: {room_key.item_id}, "
            f"Borrower: {room_key.borrower_id}, "
            f"Owner: {room_key.owner_id}, "
            f"Message: {text}"
        )
        return True


class WebhookNotificationService(NotificationService):
    """
    Notification service that forwards system messages via HTTP webhook

    Sends JSON payload to configured webhook URL.
    """

    def __init__(self, webhook_url: str, timeout: float = 10.0):
        """
        Initialize webhook notification service

        Args:
            webhook_url: URL to POST messages to
            timeout: Request timeout in seconds
        """
        self.webhook_url = webhook_url
        self.timeout = timeout

    async def emit_system_message(self, room_key: ChatRoomKey, text: str) -> bool:
        payload = {
            "type": "rental_system_message",
            "borrower_id": room_key.borrower_id,
            "owner_id": room_key.owner_id,
            "item_id": room_key.item_id,
            "text": text,
            "sent_at": datetime.utcnow().isoformat(),
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.webhook_url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
                logger.info(f"Webhook notification sent for item {room_key.item_id} to {self.webhook_url}")
                return True
        except httpx.HTTPError as e:
            logger.error(f"Failed to send webhook notification for item {room_key.item_id}: {e}")
            return False


class CompositeNotificationService(NotificationService):
    """
    Notification service that delegates to multiple services

    Delivered if at least one delivery sink accepted the message. Observers
    (such as the logging sink) see every message but never count as delivery.
    """

    def __init__(
        self,
        services: list[NotificationService],
        observers: Optional[list[NotificationService]] = None,
    ):
        self.services = services
        self.observers = observers or []

    async def emit_system_message(self, room_key: ChatRoomKey, text: str) -> bool:
        for observer in self.observers:
            try:
                await observer.emit_system_message(room_key, text)
            except Exception as e:
                logger.error(f"Notification observer {type(observer).__name__} failed: {e}")

        success = False
        for service in self.services:
            try:
                if await service.emit_system_message(room_key, text):
                    success = True
            except Exception as e:
                logger.error(f"Notification service {type(service).__name__} failed: {e}")
        return success


def create_notification_service(
    session_factory: Optional[Callable[[], AsyncSession]] = None,
    webhook_url: Optional[str] = None,
) -> NotificationService:
    """
    Factory function to create appropriate notification service

    Args:
        session_factory: If provided, system messages are posted to chat rooms
        webhook_url: Optional webhook URL to forward messages to

    Returns:
        Configured NotificationService (logging only when nothing else is set)
    """
    services: list[NotificationService] = []

    if session_factory is not None:
        services.append(ChatNotificationService(session_factory))

    if webhook_url:
        services.append(WebhookNotificationService(webhook_url))

    if not services:
        return LoggingNotificationService()

    return CompositeNotificationService(services, observers=[LoggingNotificationService()])
