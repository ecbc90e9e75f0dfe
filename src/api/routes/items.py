"""Item API Routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.item_request import CreateItemRequestSchema
from src.app.use_cases.items import (
    CreateItem,
    GetItem,
    DeleteItem,
    CreateItemCommandDTO,
    ItemResponseDTO,
)
from src.adapter.repositories import SqlAlchemyItemRepository, SqlAlchemyUserRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_actor_id
from src.api.error import ClientError

router = APIRouter(prefix="/items", tags=["Items"])


@router.post("", response_model=ItemResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_item(
    request: CreateItemRequestSchema,
    actor_id: str = Depends(get_actor_id),
    session: AsyncSession = Depends(get_session),
):
    """List an item for rent. The caller becomes the owner."""
    use_case = CreateItem(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyItemRepository(session),
        SqlAlchemyUserRepository(session),
    )
    result = await use_case.execute(
        CreateItemCommandDTO(owner_id=actor_id, **request.model_dump())
    )

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/{item_id}", response_model=ItemResponseDTO)
async def get_item(item_id: int, session: AsyncSession = Depends(get_session)):
    result = await GetItem(SqlAlchemyItemRepository(session)).execute(item_id)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: int,
    actor_id: str = Depends(get_actor_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Soft delete a listing.

    **Returns:**
    - 204: Deleted
    - 403: Caller is neither the owner nor an admin
    - 404: Item not found
    """
    use_case = DeleteItem(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyItemRepository(session),
        SqlAlchemyUserRepository(session),
    )
    result = await use_case.execute(item_id, actor_id)
    if result.is_err():
        raise ClientError(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
