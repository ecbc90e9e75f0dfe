from .user_repository import UserRepository
from .item_repository import ItemRepository
from .rental_repository import RentalRepository
from .wallet_transaction_repository import WalletTransactionRepository
from .chat_repository import ChatRepository

__all__ = [
    "UserRepository",
    "ItemRepository",
    "RentalRepository",
    "WalletTransactionRepository",
    "ChatRepository",
]
