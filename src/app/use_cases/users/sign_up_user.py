"""SignUpUser Use Case

Creates a member account and credits the welcome bonus.
"""

import logging
from typing import Iterable
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.ledger_service import LedgerService
from src.app.repositories.user_repository import UserRepository
from src.app.use_cases.errors import STORAGE_ERRORS, storage_unavailable
from src.domain.user import User
from src.domain.wallet_transaction import TransactionType
from .dtos import SignUpCommandDTO, UserResponseDTO

logger = logging.getLogger(__name__)

DEFAULT_WELCOME_BONUS = 100000


class SignUpUser:
    """
    Use Case: Register a new member

    Business Rules:
    1. Email must be unique
    2. The wallet starts at 0 and the welcome bonus is credited through the
       ledger as one CHARGE transaction, so the balance reconciles from day one
    3. User row and bonus transaction are committed together
    4. Emails listed in admin_emails are created as admins
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_repo: UserRepository,
        ledger: LedgerService,
        welcome_bonus: int = DEFAULT_WELCOME_BONUS,
        admin_emails: Iterable[str] = (),
    ):
        self.uow = uow
        self.user_repo = user_repo
        self.ledger = ledger
        self.welcome_bonus = welcome_bonus
        self.admin_emails = {e.strip().lower() for e in admin_emails}

    async def execute(self, command: SignUpCommandDTO) -> Result[UserResponseDTO]:
        email = command.email.strip().lower()
        try:
            if await self.user_repo.get_by_email(email):
                return Return.err(
                    Error(code="EMAIL_TAKEN", message=f"Email {email} is already registered")
                )

            user = await self.user_repo.create(
                User(
                    email=email,
                    nickname=command.nickname.strip(),
                    balance=0,
                    is_admin=email in self.admin_emails,
                )
            )

            if self.welcome_bonus > 0:
                bonus = await self.ledger.credit(
                    user.id,
                    self.welcome_bonus,
                    TransactionType.CHARGE,
                    "Welcome bonus",
                )
                if bonus.is_err():
                    await self.uow.rollback()
                    return Return.err(bonus.error)

            await self.uow.commit()

        except IntegrityError:
            await self.uow.rollback()
            return Return.err(
                Error(code="EMAIL_TAKEN", message=f"Email {email} is already registered")
            )
        except STORAGE_ERRORS as e:
            await self.uow.rollback()
            return Return.err(storage_unavailable(e))
        except Exception as e:
            await self.uow.rollback()
            logger.exception("Sign-up failed")
            return Return.err(
                Error(code="SIGN_UP_FAILED", message="Failed to create account", reason=str(e))
            )

        logger.info(f"User {user.id} signed up with welcome bonus {self.welcome_bonus}")
        return Return.ok(UserResponseDTO.from_entity(user))
