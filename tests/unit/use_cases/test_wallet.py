"""Unit tests for wallet use cases

Tests cover:
- GetWallet balance and paged history
- TopUpWallet / WithdrawWallet commit on success and roll back on failure
"""

import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from libs.result import Return, Error
from src.app.use_cases.wallet import (
    GetWallet,
    TopUpWallet,
    WithdrawWallet,
    TopUpCommandDTO,
    WithdrawCommandDTO,
)
from src.domain.user import User
from src.domain.wallet_transaction import WalletTransaction, TransactionType


def make_transaction(txn_id: int, amount: int, balance_after: int, txn_type: TransactionType):
    return WalletTransaction(
        id=txn_id,
        user_id="user_1",
        transaction_type=txn_type,
        amount=amount,
        balance_after=balance_after,
        description="test",
        created_at=datetime.utcnow(),
    )


@pytest.fixture
def mock_ledger():
    return MagicMock()


@pytest.mark.asyncio
class TestGetWallet:
    async def test_returns_balance_and_history(self):
        user_repo = MagicMock()
        user_repo.get_by_id = AsyncMock(
            return_value=User(id="user_1", email="a@example.com", nickname="a", balance=150000)
        )
        transaction_repo = MagicMock()
        transaction_repo.get_by_user_id = AsyncMock(
            return_value=(
                [
                    make_transaction(2, 50000, 150000, TransactionType.CHARGE),
                    make_transaction(1, 100000, 100000, TransactionType.CHARGE),
                ],
                2,
            )
        )

        result = await GetWallet(user_repo, transaction_repo).execute("user_1", limit=10, offset=0)

        assert result.is_ok()
        wallet = result.value
        assert wallet.balance == 150000
        assert wallet.total == 2
        assert [t.id for t in wallet.transactions] == [2, 1]
        assert wallet.transactions[0].transaction_type == "CHARGE"
        transaction_repo.get_by_user_id.assert_called_once_with(
            user_id="user_1", limit=10, offset=0
        )

    async def test_unknown_user(self):
        user_repo = MagicMock()
        user_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetWallet(user_repo, MagicMock()).execute("ghost")

        assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
class TestTopUpWallet:
    async def test_top_up_commits_charge(self, mock_uow, mock_ledger):
        mock_ledger.credit = AsyncMock(
            return_value=Return.ok(make_transaction(5, 50000, 150000, TransactionType.CHARGE))
        )

        result = await TopUpWallet(mock_uow, mock_ledger).execute(
            TopUpCommandDTO(user_id="user_1", amount=50000)
        )

        assert result.is_ok()
        assert result.value.amount == 50000
        assert result.value.balance_after == 150000
        args = mock_ledger.credit.call_args.args
        assert args[:3] == ("user_1", 50000, TransactionType.CHARGE)
        mock_uow.commit.assert_called_once()

    async def test_ledger_error_rolls_back(self, mock_uow, mock_ledger):
        mock_ledger.credit = AsyncMock(
            return_value=Return.err(Error(code="USER_NOT_FOUND", message="User ghost not found"))
        )

        result = await TopUpWallet(mock_uow, mock_ledger).execute(
            TopUpCommandDTO(user_id="ghost", amount=50000)
        )

        assert result.error.code == "USER_NOT_FOUND"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()

    async def test_unexpected_error(self, mock_uow, mock_ledger):
        mock_ledger.credit = AsyncMock(side_effect=ValueError("boom"))

        result = await TopUpWallet(mock_uow, mock_ledger).execute(
            TopUpCommandDTO(user_id="user_1", amount=50000)
        )

        assert result.error.code == "TOP_UP_FAILED"
        mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
class TestWithdrawWallet:
    async def test_withdraw_commits(self, mock_uow, mock_ledger):
        mock_ledger.debit = AsyncMock(
            return_value=Return.ok(make_transaction(6, -30000, 70000, TransactionType.WITHDRAW))
        )

        result = await WithdrawWallet(mock_uow, mock_ledger).execute(
            WithdrawCommandDTO(user_id="user_1", amount=30000)
        )

        assert result.is_ok()
        assert result.value.amount == -30000
        assert mock_ledger.debit.call_args.args[2] == TransactionType.WITHDRAW
        mock_uow.commit.assert_called_once()

    async def test_insufficient_funds(self, mock_uow, mock_ledger):
        mock_ledger.debit = AsyncMock(
            return_value=Return.err(
                Error(
                    code="INSUFFICIENT_FUNDS",
                    message="Insufficient funds. Required: 200000, Available: 100000",
                    details={"required": 200000, "current": 100000},
                )
            )
        )

        result = await WithdrawWallet(mock_uow, mock_ledger).execute(
            WithdrawCommandDTO(user_id="user_1", amount=200000)
        )

        assert result.error.code == "INSUFFICIENT_FUNDS"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()
