"""Request schemas for Wallet API"""

from typing import Optional
from pydantic import BaseModel, Field


class TopUpRequestSchema(BaseModel):
    """Request schema for POST /wallet/topup; amount falls back to the configured default"""

    amount: Optional[int] = Field(default=None, gt=0, description="Amount to add (minor units)")


class WithdrawRequestSchema(BaseModel):
    amount: int = Field(..., gt=0, description="Amount to withdraw (minor units)")
