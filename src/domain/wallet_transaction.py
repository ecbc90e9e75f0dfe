"""Wallet Transaction Domain Entity

Immutable append-only audit trail of all wallet balance mutations.
The sum of a user's transaction amounts always equals their balance.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, String
from src.domain.base import BaseModel, BigIntPK


class TransactionType(str, Enum):
    """Wallet transaction types"""
    CHARGE = "CHARGE"      # Money added to the wallet (top-up, welcome bonus)
    WITHDRAW = "WITHDRAW"  # Money taken out of the wallet
    PAYMENT = "PAYMENT"    # Rental fee + deposit paid by the borrower
    REFUND = "REFUND"      # Deposit returned to the borrower
    EARNING = "EARNING"    # Rental fee paid out to the owner


class WalletTransaction(BaseModel, table=True):
    """
    Wallet Transaction - Immutable record of one balance change

    Domain Rules:
    - Transactions are immutable (append-only)
    - amount is signed: positive for credits, negative for debits
    - balance_after is the owner's balance right after this transaction
    - related_rental_id links PAYMENT/REFUND/EARNING to their rental
    """

    __tablename__ = "transactions"
    __table_args__ = (
        Index('ix_transactions_user_created', 'user_id', 'created_at'),
        Index('ix_transactions_related_rental_id', 'related_rental_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntPK, primary_key=True, autoincrement=True),
        description="Unique transaction identifier (auto-increment)"
    )

    user_id: str = Field(
        foreign_key="users.id",
        description="Wallet owner"
    )

    transaction_type: TransactionType = Field(
        description="Type of transaction (CHARGE, WITHDRAW, PAYMENT, REFUND, EARNING)"
    )

    amount: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Signed amount in minor units"
    )

    balance_after: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Balance after this transaction"
    )

    description: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Human readable description"
    )

    related_rental_id: Optional[int] = Field(
        default=None,
        foreign_key="rentals.id",
        description="Rental this movement belongs to"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Transaction timestamp (immutable)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "id": 7,
                "user_id": "6b1e2c1a-2f7e-4d55-9a51-0b1f9a8f3c10",
                "transaction_type": "PAYMENT",
                "amount": -80000,
                "balance_after": 20000,
                "description": "Rental fee 30000 + deposit 50000",
                "related_rental_id": 3,
                "created_at": "2024-01-01T00:00:00Z"
            }
        }
