"""Item Directory

Read-only access to the rental terms of listed items.
"""

from dataclasses import dataclass
from libs.result import Result, Return, Error
from src.app.repositories.item_repository import ItemRepository


@dataclass(frozen=True)
class RentalTerms:
    item_id: int
    owner_id: str
    price_per_day: int
    deposit: int


class ItemDirectory:
    """Supplies the terms a new rental snapshots from its item"""

    def __init__(self, item_repo: ItemRepository):
        self.item_repo = item_repo

    async def get_active_terms(self, item_id: int) -> Result[RentalTerms]:
        """
        Get price, deposit and owner of a rentable item

        Errors:
            ITEM_NOT_FOUND: No item with this ID
            ITEM_DELETED: Item was soft-deleted
        """
        item = await self.item_repo.get_by_id(item_id)
        if not item:
            return Return.err(
                Error(code="ITEM_NOT_FOUND", message=f"Item {item_id} not found")
            )
        if item.is_deleted:
            return Return.err(
                Error(code="ITEM_DELETED", message=f"Item {item_id} is no longer listed")
            )
        return Return.ok(
            RentalTerms(
                item_id=item.id,
                owner_id=item.owner_id,
                price_per_day=item.price_per_day,
                deposit=item.deposit,
            )
        )
