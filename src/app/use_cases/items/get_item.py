from libs.result import Result, Return, Error
from src.app.repositories.item_repository import ItemRepository
from .dtos import ItemResponseDTO


class GetItem:
    """Public lookup of a listing; soft-deleted items are hidden"""

    def __init__(self, item_repo: ItemRepository):
        self.item_repo = item_repo

    async def execute(self, item_id: int) -> Result[ItemResponseDTO]:
        item = await self.item_repo.get_by_id(item_id)
        if not item or item.is_deleted:
            return Return.err(
                Error(code="ITEM_NOT_FOUND", message=f"Item {item_id} not found")
            )
        return Return.ok(ItemResponseDTO.from_entity(item))
