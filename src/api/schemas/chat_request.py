"""Request schemas for Chat API"""

from pydantic import BaseModel, Field


class OpenRoomRequestSchema(BaseModel):
    """Open the room with the owner of an item; the caller is the borrower side"""

    item_id: int = Field(..., description="Item the conversation is about")


class PostMessageRequestSchema(BaseModel):
    text: str = Field(..., min_length=1, max_length=2000)
