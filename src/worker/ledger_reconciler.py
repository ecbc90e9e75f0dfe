"""Wallet Ledger Reconciliation Worker

Audits the escrow ledger: every wallet balance must equal the sum of the
user's transaction amounts. Mismatches are reported, never repaired.

    python -m src.worker.ledger_reconciler --once
    python -m src.worker.ledger_reconciler --interval 3600
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories import SqlAlchemyUserRepository, SqlAlchemyWalletTransactionRepository
from src.app.use_cases.wallet import ReconcileLedger, ReconciliationResultDTO

logger = logging.getLogger(__name__)


def _skipped_result() -> ReconciliationResultDTO:
    return ReconciliationResultDTO(
        total_users_checked=0,
        discrepancies_found=0,
        reconciliation_time=datetime.utcnow(),
        execution_time_ms=0,
    )


class LedgerReconcilerWorker:
    """
    Runs ReconcileLedger on a schedule in its own database session

    A session factory can be passed in to share an engine with the API
    process; otherwise the worker opens and owns an engine on db_uri.
    """

    def __init__(self, db_uri: Optional[str] = None, session_factory=None):
        self.db_uri = db_uri or ApplicationConfig.DB_URI
        self.engine = None
        if session_factory is None:
            self.engine = create_async_engine(self.db_uri, echo=False, future=True)
            session_factory = sessionmaker(
                self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
            )
        self.session_factory = session_factory
        self.failed_cycles = 0
        self._stop = asyncio.Event()

    async def run_once(self) -> ReconciliationResultDTO:
        """
        Audit every wallet once

        Raises:
            RuntimeError: the audit itself could not complete
        """
        if not ApplicationConfig.RECONCILIATION_ENABLED:
            logger.info("Ledger reconciliation disabled")
            return _skipped_result()

        async with self.session_factory() as session:
            result = await ReconcileLedger(
                user_repo=SqlAlchemyUserRepository(session),
                transaction_repo=SqlAlchemyWalletTransactionRepository(session),
            ).execute()

        if result.is_err():
            raise RuntimeError(f"{result.error.code}: {result.error.message}")

        report = result.value
        for d in report.discrepancies:
            logger.error(
                f"Wallet out of balance: user={d.user_id} balance={d.ledger_balance} "
                f"transactions={d.calculated_balance} diff={d.discrepancy}"
            )
        return report

    async def run_forever(self, interval_seconds: int = ApplicationConfig.RECONCILIATION_INTERVAL_SECONDS):
        """Audit every interval_seconds until stop() is called; a failed audit does not end the loop"""
        logger.info(f"Ledger reconciliation every {interval_seconds}s")

        while not self._stop.is_set():
            try:
                report = await self.run_once()
                self.failed_cycles = 0
                logger.info(
                    f"Audited {report.total_users_checked} wallets, "
                    f"{report.discrepancies_found} out of balance ({report.execution_time_ms}ms)"
                )
            except Exception as e:
                self.failed_cycles += 1
                logger.error(f"Ledger audit failed ({self.failed_cycles} in a row): {e}")

            try:
                await asyncio.wait_for(self._stop.wait(), timeout=interval_seconds)
            except asyncio.TimeoutError:
                pass

    def stop(self):
        self._stop.set()

    async def shutdown(self):
        self.stop()
        if self.engine is not None:
            await self.engine.dispose()
        logger.info("Ledger reconciler stopped")


async def main():
    import argparse

    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Audit wallet balances against the transaction ledger")
    parser.add_argument("--once", action="store_true", help="Audit once, print the report and exit")
    parser.add_argument(
        "--interval",
        type=int,
        default=ApplicationConfig.RECONCILIATION_INTERVAL_SECONDS,
        help="Seconds between audits",
    )
    args = parser.parse_args()

    worker = LedgerReconcilerWorker()
    try:
        if args.once:
            report = await worker.run_once()
            print(report.model_dump_json(indent=2))
        else:
            await worker.run_forever(interval_seconds=args.interval)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
