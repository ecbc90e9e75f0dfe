from .base import BaseModel, generate_uuid
from .user import User
from .item import Item
from .rental import Rental, RentalStatus, ActorRole
from .rental_transition import (
    MonetaryEffect,
    TransitionRule,
    TRANSITIONS,
    TERMINAL_STATUSES,
    find_transition,
    allowed_next_statuses,
)
from .wallet_transaction import WalletTransaction, TransactionType
from .chat import ChatRoom, ChatMessage, ChatRoomKey, room_key_of, SYSTEM_SENDER_ID

__all__ = [
    "BaseModel",
    "generate_uuid",
    "User",
    "Item",
    "Rental",
    "RentalStatus",
    "ActorRole",
    "MonetaryEffect",
    "TransitionRule",
    "TRANSITIONS",
    "TERMINAL_STATUSES",
    "find_transition",
    "allowed_next_statuses",
    "WalletTransaction",
    "TransactionType",
    "ChatRoom",
    "ChatMessage",
    "ChatRoomKey",
    "room_key_of",
    "SYSTEM_SENDER_ID",
]
