from typing import Optional
from fastapi import Header
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.notification_service import create_notification_service
from src.app.services.notification_service import NotificationService
from src.api.error import ClientError
import src.domain  # noqa: F401  registers all tables on SQLModel.metadata

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_notification_service() -> NotificationService:
    return create_notification_service(
        session_factory=AsyncSessionLocal if ApplicationConfig.CHAT_NOTIFICATIONS_ENABLED else None,
        webhook_url=ApplicationConfig.RENTAL_NOTIFICATION_WEBHOOK,
    )


async def get_actor_id(
    x_user_id: Optional[str] = Header(default=None, alias=ApplicationConfig.AUTH_HEADER),
) -> str:
    """Caller identity from the gateway header; routes never authenticate themselves"""
    if not x_user_id:
        raise ClientError(
            Error(code="UNAUTHORIZED", message=f"Missing {ApplicationConfig.AUTH_HEADER} header")
        )
    return x_user_id


async def init_db() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
