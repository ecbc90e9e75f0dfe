"""TopUpWallet Use Case

Charges money into a user's wallet (CHARGE transaction).
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.ledger_service import LedgerService
from src.app.use_cases.errors import STORAGE_ERRORS, storage_unavailable
from src.domain.wallet_transaction import TransactionType
from .dtos import TopUpCommandDTO, TransactionDTO

logger = logging.getLogger(__name__)


class TopUpWallet:
    """
    Use Case: Add money to a wallet

    The ledger credit and its CHARGE transaction are committed together.
    """

    def __init__(self, uow: UnitOfWork, ledger: LedgerService):
        self.uow = uow
        self.ledger = ledger

    async def execute(self, command: TopUpCommandDTO) -> Result[TransactionDTO]:
        try:
            result = await self.ledger.credit(
                command.user_id,
                command.amount,
                TransactionType.CHARGE,
                f"Top-up {command.amount}",
            )
            if result.is_err():
                await self.uow.rollback()
                return Return.err(result.error)

            await self.uow.commit()
            return Return.ok(TransactionDTO.from_entity(result.value))

        except STORAGE_ERRORS as e:
            await self.uow.rollback()
            return Return.err(storage_unavailable(e))
        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Top-up failed for user {command.user_id}")
            return Return.err(
                Error(
                    code="TOP_UP_FAILED",
                    message="Failed to top up wallet",
                    reason=str(e),
                )
            )
