"""Unit tests for ReconcileLedger use case

Tests cover:
- Balance vs transaction sum comparison per user
- Positive and negative discrepancies
- Empty system
- Error handling
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.wallet.reconcile_ledger import ReconcileLedger
from src.domain.user import User


@pytest.fixture
def mock_user_repo():
    return MagicMock()


@pytest.fixture
def mock_transaction_repo():
    return MagicMock()


@pytest.fixture
def reconcile_use_case(mock_user_repo, mock_transaction_repo):
    return ReconcileLedger(user_repo=mock_user_repo, transaction_repo=mock_transaction_repo)


def make_user(user_id: str, balance: int) -> User:
    return User(id=user_id, email=f"{user_id}@example.com", nickname=user_id, balance=balance)


@pytest.mark.asyncio
class TestReconcileLedgerCheck:
    async def test_no_discrepancy_when_balances_match(
        self, reconcile_use_case, mock_user_repo, mock_transaction_repo
    ):
        """
        Given: Every balance equals its transaction sum
        When: Reconciliation runs
        Then: No discrepancies reported
        """
        # Arrange
        mock_user_repo.get_all = AsyncMock(
            return_value=[make_user("u1", 100000), make_user("u2", 0)]
        )
        mock_transaction_repo.get_amount_sum_by_user = AsyncMock(side_effect=[100000, 0])

        # Act
        result = await reconcile_use_case.execute()

        # Assert
        assert result.is_ok()
        assert result.value.total_users_checked == 2
        assert result.value.discrepancies_found == 0
        assert result.value.discrepancies == []

    async def test_detects_positive_and_negative_discrepancies(
        self, reconcile_use_case, mock_user_repo, mock_transaction_repo
    ):
        mock_user_repo.get_all = AsyncMock(
            return_value=[make_user("u1", 100000), make_user("u2", 5000), make_user("u3", 700)]
        )
        mock_transaction_repo.get_amount_sum_by_user = AsyncMock(side_effect=[90000, 5000, 1000])

        result = await reconcile_use_case.execute()

        assert result.is_ok()
        assert result.value.discrepancies_found == 2
        by_user = {d.user_id: d for d in result.value.discrepancies}
        assert by_user["u1"].discrepancy == 10000
        assert by_user["u1"].ledger_balance == 100000
        assert by_user["u1"].calculated_balance == 90000
        assert by_user["u3"].discrepancy == -300

    async def test_handles_no_users(self, reconcile_use_case, mock_user_repo):
        mock_user_repo.get_all = AsyncMock(return_value=[])

        result = await reconcile_use_case.execute()

        assert result.is_ok()
        assert result.value.total_users_checked == 0
        assert result.value.execution_time_ms >= 0


@pytest.mark.asyncio
class TestReconcileLedgerErrorHandling:
    async def test_returns_error_on_repo_failure(
        self, reconcile_use_case, mock_user_repo, mock_transaction_repo
    ):
        mock_user_repo.get_all = AsyncMock(return_value=[make_user("u1", 100)])
        mock_transaction_repo.get_amount_sum_by_user = AsyncMock(
            side_effect=Exception("Database connection lost")
        )

        result = await reconcile_use_case.execute()

        assert result.is_err()
        assert result.error.code == "RECONCILIATION_FAILED"
        assert "Database connection lost" in result.error.reason
