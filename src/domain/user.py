"""User Domain Entity

A marketplace member and the owner of exactly one wallet balance.
"""

from datetime import datetime
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, BigInteger, String
from src.domain.base import BaseModel, generate_uuid


class User(BaseModel, table=True):
    """
    User - Marketplace member with an internal wallet

    Domain Rules:
    - Balance is integer minor units and must be non-negative
    - Balance is mutated only through ledger operations, each of which
      appends a WalletTransaction
    - Users are never deleted; banning keeps the balance intact
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint('balance >= 0', name='user_balance_non_negative'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="User identifier (uuid)"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True, index=True),
        description="Login email (unique)"
    )

    nickname: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Display name"
    )

    balance: int = Field(
        default=0,
        sa_column=Column(BigInteger, nullable=False, default=0),
        description="Wallet balance in minor units (must be >= 0)"
    )

    trust_score: float = Field(
        default=36.5,
        description="Reputation score shown to other members"
    )

    is_banned: bool = Field(default=False, description="Banned members cannot rent")

    is_admin: bool = Field(default=False, description="Platform administrator flag")

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Sign-up timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last balance or profile update"
    )
