"""Unit tests for SqlAlchemyUnitOfWork"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


@pytest.fixture
def session():
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.in_transaction = MagicMock(return_value=True)
    return session


@pytest.mark.asyncio
class TestSqlAlchemyUnitOfWork:
    async def test_commit(self, session):
        await SqlAlchemyUnitOfWork(session).commit()

        session.commit.assert_awaited_once()

    async def test_rollback_with_pending_work(self, session):
        await SqlAlchemyUnitOfWork(session).rollback()

        session.rollback.assert_awaited_once()

    async def test_rollback_without_transaction_is_noop(self, session):
        session.in_transaction.return_value = False

        await SqlAlchemyUnitOfWork(session).rollback()

        session.rollback.assert_not_called()

    async def test_context_manager_rolls_back_on_error(self, session):
        with pytest.raises(RuntimeError):
            async with SqlAlchemyUnitOfWork(session):
                raise RuntimeError("boom")

        session.rollback.assert_awaited_once()
