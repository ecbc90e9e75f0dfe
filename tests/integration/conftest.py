import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401  registers all tables on SQLModel.metadata
from src.depends import get_session, get_notification_service
from src.adapter.repositories import (
    SqlAlchemyItemRepository,
    SqlAlchemyRentalRepository,
    SqlAlchemyUserRepository,
    SqlAlchemyWalletTransactionRepository,
)
from src.adapter.services.notification_service import (
    ChatNotificationService,
    create_notification_service,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.ledger_service import LedgerService
from src.app.use_cases.items import CreateItem, CreateItemCommandDTO
from src.app.use_cases.users import SignUpUser, SignUpCommandDTO
from src.app.use_cases.rentals import (
    ApplyTransition,
    ApplyTransitionCommandDTO,
    CreateRental,
    CreateRentalCommandDTO,
)
from src.app.services.item_directory import ItemDirectory
from src.domain.rental import RentalStatus


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create test database engine on a throwaway SQLite file"""
    test_db_url = f"sqlite+aiosqlite:///{tmp_path / 'rental_test.db'}"

    engine = create_async_engine(test_db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Create a new database session for each test"""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def create_member(session_factory):
    """
    Sign a member up with the given opening balance

    The balance goes through the ledger as the welcome bonus, so every seeded
    wallet reconciles with its transactions.
    """

    async def _create(email: str, balance: int = 100000, nickname: str = "member") -> str:
        async with session_factory() as session:
            user_repo = SqlAlchemyUserRepository(session)
            ledger = LedgerService(user_repo, SqlAlchemyWalletTransactionRepository(session))
            result = await SignUpUser(
                SqlAlchemyUnitOfWork(session), user_repo, ledger, welcome_bonus=balance
            ).execute(SignUpCommandDTO(email=email, nickname=nickname))
            assert result.is_ok(), result.error
            return result.value.id

    return _create


@pytest_asyncio.fixture
async def create_listing(session_factory):
    async def _create(owner_id: str, price_per_day: int = 15000, deposit: int = 50000) -> int:
        async with session_factory() as session:
            result = await CreateItem(
                SqlAlchemyUnitOfWork(session),
                SqlAlchemyItemRepository(session),
                SqlAlchemyUserRepository(session),
            ).execute(
                CreateItemCommandDTO(
                    owner_id=owner_id,
                    title="Camping tent",
                    category="camping",
                    price_per_day=price_per_day,
                    deposit=deposit,
                )
            )
            assert result.is_ok(), result.error
            return result.value.id

    return _create


@pytest_asyncio.fixture
async def client(session_factory):
    """Create test client with database session override"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        async with session_factory() as session:
            yield session

    def override_get_notification_service():
        return create_notification_service(session_factory=session_factory)

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_notification_service] = override_get_notification_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def request_rental(session_factory):
    async def _request(borrower_id: str, item_id: int, days: int = 2, is_delivery: bool = False):
        async with session_factory() as session:
            return await CreateRental(
                SqlAlchemyUnitOfWork(session),
                SqlAlchemyRentalRepository(session),
                SqlAlchemyUserRepository(session),
                ItemDirectory(SqlAlchemyItemRepository(session)),
            ).execute(
                CreateRentalCommandDTO(
                    borrower_id=borrower_id, item_id=item_id, days=days, is_delivery=is_delivery
                )
            )

    return _request


@pytest_asyncio.fixture
async def transition(session_factory):
    """Apply one status transition in its own session, posting system messages to chat"""

    async def _transition(rental_id: int, target: RentalStatus, actor_id: str, notification_service=None):
        async with session_factory() as session:
            user_repo = SqlAlchemyUserRepository(session)
            return await ApplyTransition(
                SqlAlchemyUnitOfWork(session),
                SqlAlchemyRentalRepository(session),
                LedgerService(user_repo, SqlAlchemyWalletTransactionRepository(session)),
                notification_service=notification_service or ChatNotificationService(session_factory),
            ).execute(
                ApplyTransitionCommandDTO(rental_id=rental_id, target_status=target, actor_id=actor_id)
            )

    return _transition


@pytest_asyncio.fixture
async def balance_of(session_factory):
    async def _balance(user_id: str) -> int:
        async with session_factory() as session:
            user = await SqlAlchemyUserRepository(session).get_by_id(user_id)
            return user.balance

    return _balance
