"""Item listing use cases"""
from .create_item import CreateItem
from .get_item import GetItem
from .delete_item import DeleteItem
from .dtos import CreateItemCommandDTO, ItemResponseDTO

__all__ = [
    "CreateItem",
    "GetItem",
    "DeleteItem",
    "CreateItemCommandDTO",
    "ItemResponseDTO",
]
