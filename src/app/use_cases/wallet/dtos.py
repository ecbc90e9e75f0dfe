"""Data Transfer Objects for Wallet Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.wallet_transaction import WalletTransaction


class TopUpCommandDTO(BaseModel):
    """
    Command DTO for charging money into a wallet

    Used as input to TopUpWallet use case.
    """

    user_id: str = Field(..., description="Wallet owner")

    amount: int = Field(..., gt=0, description="Amount to add (minor units, > 0)")


class WithdrawCommandDTO(BaseModel):
    """
    Command DTO for withdrawing money from a wallet

    Used as input to WithdrawWallet use case.
    """

    user_id: str = Field(..., description="Wallet owner")

    amount: int = Field(..., gt=0, description="Amount to withdraw (minor units, > 0)")


class TransactionDTO(BaseModel):
    """Single wallet transaction in a history listing"""

    id: int
    transaction_type: str
    amount: int
    balance_after: int
    description: str
    related_rental_id: Optional[int] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, txn: WalletTransaction) -> "TransactionDTO":
        return cls(
            id=txn.id,
            transaction_type=txn.transaction_type.value,
            amount=txn.amount,
            balance_after=txn.balance_after,
            description=txn.description,
            related_rental_id=txn.related_rental_id,
            created_at=txn.created_at,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": 7,
                "transaction_type": "PAYMENT",
                "amount": -80000,
                "balance_after": 20000,
                "description": "Rental fee 30000 + deposit 50000",
                "related_rental_id": 3,
                "created_at": "2024-01-01T00:00:00Z"
            }
        }


class WalletResponseDTO(BaseModel):
    """
    Response DTO for a wallet view

    Returned by GetWallet use case.
    """

    user_id: str
    balance: int
    transactions: List[TransactionDTO] = Field(default_factory=list)
    total: int = Field(..., description="Total number of transactions")
    limit: int
    offset: int


class LedgerDiscrepancyDTO(BaseModel):
    """A user whose balance does not match the sum of their transactions"""

    user_id: str
    ledger_balance: int = Field(..., description="Balance stored on the user")
    calculated_balance: int = Field(..., description="Sum of transaction amounts")
    discrepancy: int = Field(..., description="ledger_balance - calculated_balance")


class ReconciliationResultDTO(BaseModel):
    """
    Response DTO for ledger reconciliation

    Returned by ReconcileLedger use case.
    """

    total_users_checked: int
    discrepancies_found: int
    discrepancies: List[LedgerDiscrepancyDTO] = Field(default_factory=list)
    reconciliation_time: datetime
    execution_time_ms: int
