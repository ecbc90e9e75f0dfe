from .unit_of_work import UnitOfWork
from .notification_service import NotificationService
from .ledger_service import LedgerService
from .item_directory import ItemDirectory, RentalTerms

__all__ = [
    "UnitOfWork",
    "NotificationService",
    "LedgerService",
    "ItemDirectory",
    "RentalTerms",
]
