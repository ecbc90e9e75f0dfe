"""Unit tests for SignUpUser and GetUser use cases"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import IntegrityError

from libs.result import Return, Error
from src.app.use_cases.users import SignUpUser, GetUser, SignUpCommandDTO
from src.domain.user import User
from src.domain.wallet_transaction import TransactionType


@pytest.fixture
def mock_user_repo():
    repo = MagicMock()
    repo.get_by_email = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=lambda user: user)
    return repo


@pytest.fixture
def mock_ledger():
    ledger = MagicMock()
    ledger.credit = AsyncMock(return_value=Return.ok(MagicMock()))
    return ledger


@pytest.mark.asyncio
class TestSignUpUser:
    async def test_creates_user_and_credits_welcome_bonus(
        self, mock_uow, mock_user_repo, mock_ledger
    ):
        """
        Given: Unused email
        When: A member signs up
        Then: User created at balance 0, bonus credited as CHARGE, one commit
        """
        # Act
        result = await SignUpUser(mock_uow, mock_user_repo, mock_ledger).execute(
            SignUpCommandDTO(email="  Alice@Example.com ", nickname="alice")
        )

        # Assert
        assert result.is_ok()
        assert result.value.email == "alice@example.com"
        created = mock_user_repo.create.call_args.args[0]
        assert created.balance == 0
        args = mock_ledger.credit.call_args.args
        assert args[1:4] == (100000, TransactionType.CHARGE, "Welcome bonus")
        mock_uow.commit.assert_called_once()

    async def test_custom_bonus(self, mock_uow, mock_user_repo, mock_ledger):
        result = await SignUpUser(
            mock_uow, mock_user_repo, mock_ledger, welcome_bonus=5000
        ).execute(SignUpCommandDTO(email="a@example.com", nickname="a"))

        assert result.is_ok()
        assert mock_ledger.credit.call_args.args[1] == 5000

    async def test_configured_admin_email_creates_admin(self, mock_uow, mock_user_repo, mock_ledger):
        use_case = SignUpUser(
            mock_uow, mock_user_repo, mock_ledger, admin_emails=["Admin@Example.com"]
        )

        admin = await use_case.execute(SignUpCommandDTO(email="admin@example.com", nickname="root"))
        member = await use_case.execute(SignUpCommandDTO(email="bob@example.com", nickname="bob"))

        assert admin.value.is_admin is True
        assert member.value.is_admin is False

    async def test_zero_bonus_skips_ledger(self, mock_uow, mock_user_repo, mock_ledger):
        result = await SignUpUser(
            mock_uow, mock_user_repo, mock_ledger, welcome_bonus=0
        ).execute(SignUpCommandDTO(email="a@example.com", nickname="a"))

        assert result.is_ok()
        mock_ledger.credit.assert_not_called()

    async def test_email_taken(self, mock_uow, mock_user_repo, mock_ledger):
        mock_user_repo.get_by_email = AsyncMock(
            return_value=User(id="u1", email="a@example.com", nickname="a")
        )

        result = await SignUpUser(mock_uow, mock_user_repo, mock_ledger).execute(
            SignUpCommandDTO(email="a@example.com", nickname="a")
        )

        assert result.error.code == "EMAIL_TAKEN"
        mock_user_repo.create.assert_not_called()

    async def test_unique_violation_maps_to_email_taken(
        self, mock_uow, mock_user_repo, mock_ledger
    ):
        mock_user_repo.create = AsyncMock(
            side_effect=IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
        )

        result = await SignUpUser(mock_uow, mock_user_repo, mock_ledger).execute(
            SignUpCommandDTO(email="a@example.com", nickname="a")
        )

        assert result.error.code == "EMAIL_TAKEN"
        mock_uow.rollback.assert_called_once()

    async def test_bonus_failure_rolls_back(self, mock_uow, mock_user_repo, mock_ledger):
        mock_ledger.credit = AsyncMock(
            return_value=Return.err(Error(code="USER_NOT_FOUND", message="missing"))
        )

        result = await SignUpUser(mock_uow, mock_user_repo, mock_ledger).execute(
            SignUpCommandDTO(email="a@example.com", nickname="a")
        )

        assert result.is_err()
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestGetUser:
    async def test_found(self):
        repo = MagicMock()
        repo.get_by_id = AsyncMock(
            return_value=User(id="u1", email="a@example.com", nickname="a", balance=100000)
        )

        result = await GetUser(repo).execute("u1")

        assert result.value.balance == 100000
        assert result.value.trust_score == 36.5

    async def test_not_found(self):
        repo = MagicMock()
        repo.get_by_id = AsyncMock(return_value=None)

        result = await GetUser(repo).execute("ghost")

        assert result.error.code == "USER_NOT_FOUND"
