"""ReconcileLedger Use Case

Reconciles wallet balances against transaction history to detect discrepancies.
"""

import logging
import time
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.repositories.user_repository import UserRepository
from src.app.repositories.wallet_transaction_repository import WalletTransactionRepository
from .dtos import LedgerDiscrepancyDTO, ReconciliationResultDTO

logger = logging.getLogger(__name__)


class ReconcileLedger:
    """
    Use Case: Reconcile wallet balances against transactions

    Business Rules:
    1. For every user, balance must equal the sum of their transaction amounts
    2. Mismatches are recorded and logged
    3. Does NOT modify any data (read-only reconciliation)
    """

    def __init__(
        self,
        user_repo: UserRepository,
        transaction_repo: WalletTransactionRepository,
    ):
        self.user_repo = user_repo
        self.transaction_repo = transaction_repo

    async def execute(self) -> Result[ReconciliationResultDTO]:
        """
        Execute ledger reconciliation

        Returns:
            Result[ReconciliationResultDTO]: Reconciliation result with any discrepancies
        """
        start_time = time.time()
        reconciliation_time = datetime.utcnow()

        try:
            logger.info("Starting wallet ledger reconciliation")

            users = await self.user_repo.get_all()
            total_users = len(users)

            logger.info(f"Found {total_users} wallets to reconcile")

            discrepancies: list[LedgerDiscrepancyDTO] = []

            for user in users:
                transaction_sum = await self.transaction_repo.get_amount_sum_by_user(user.id)

                if user.balance != transaction_sum:
                    discrepancy_amount = user.balance - transaction_sum
                    discrepancies.append(
                        LedgerDiscrepancyDTO(
                            user_id=user.id,
                            ledger_balance=user.balance,
                            calculated_balance=transaction_sum,
                            discrepancy=discrepancy_amount,
                        )
                    )

                    logger.warning(
                        f"Discrepancy found for user {user.id}: "
                        f"balance={user.balance}, "
                        f"transaction_sum={transaction_sum}, "
                        f"discrepancy={discrepancy_amount}"
                    )

            execution_time_ms = int((time.time() - start_time) * 1000)

            response = ReconciliationResultDTO(
                total_users_checked=total_users,
                discrepancies_found=len(discrepancies),
                discrepancies=discrepancies,
                reconciliation_time=reconciliation_time,
                execution_time_ms=execution_time_ms,
            )

            if discrepancies:
                logger.warning(
                    f"Reconciliation complete. Found {len(discrepancies)} discrepancies "
                    f"out of {total_users} wallets in {execution_time_ms}ms"
                )
            else:
                logger.info(
                    f"Reconciliation complete. All {total_users} wallets balanced "
                    f"in {execution_time_ms}ms"
                )

            return Return.ok(response)

        except Exception as e:
            logger.error(f"Ledger reconciliation failed: {e}")
            return Return.err(
                Error(
                    code="RECONCILIATION_FAILED",
                    message="Failed to reconcile wallet ledger",
                    reason=str(e),
                )
            )
