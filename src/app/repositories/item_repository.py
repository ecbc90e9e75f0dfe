"""Item Repository Interface

Defines the contract for item listing persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.item import Item


class ItemRepository(ABC):
    """Repository interface for Item persistence"""

    @abstractmethod
    async def get_by_id(self, item_id: int) -> Optional[Item]:
        """
        Retrieve item by ID, including soft-deleted items

        Args:
            item_id: Item ID

        Returns:
            Item if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, item: Item) -> Item:
        pass

    @abstractmethod
    async def mark_deleted(self, item_id: int) -> None:
        """Soft delete an item"""
        pass
