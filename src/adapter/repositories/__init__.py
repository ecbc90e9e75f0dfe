from .user_repository import SqlAlchemyUserRepository
from .item_repository import SqlAlchemyItemRepository
from .rental_repository import SqlAlchemyRentalRepository
from .wallet_transaction_repository import SqlAlchemyWalletTransactionRepository
from .chat_repository import SqlAlchemyChatRepository

__all__ = [
    "SqlAlchemyUserRepository",
    "SqlAlchemyItemRepository",
    "SqlAlchemyRentalRepository",
    "SqlAlchemyWalletTransactionRepository",
    "SqlAlchemyChatRepository",
]
