"""WithdrawWallet Use Case

Withdraws money from a user's wallet (WITHDRAW transaction).
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.ledger_service import LedgerService
from src.app.use_cases.errors import STORAGE_ERRORS, storage_unavailable
from src.domain.wallet_transaction import TransactionType
from .dtos import WithdrawCommandDTO, TransactionDTO

logger = logging.getLogger(__name__)


class WithdrawWallet:
    """
    Use Case: Take money out of a wallet

    Business Rules:
    1. balance >= amount required (INSUFFICIENT_FUNDS otherwise)
    2. Ledger debit and WITHDRAW transaction committed together
    """

    def __init__(self, uow: UnitOfWork, ledger: LedgerService):
        self.uow = uow
        self.ledger = ledger

    async def execute(self, command: WithdrawCommandDTO) -> Result[TransactionDTO]:
        try:
            result = await self.ledger.debit(
                command.user_id,
                command.amount,
                TransactionType.WITHDRAW,
                f"Withdrawal {command.amount}",
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
            logger.exception(f"Withdrawal failed for user {command.user_id}")
            return Return.err(
                Error(
                    code="WITHDRAW_FAILED",
                    message="Failed to withdraw from wallet",
                    reason=str(e),
                )
            )
