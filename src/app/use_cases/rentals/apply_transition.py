"""ApplyTransition Use Case

Moves a rental to its next status, enforcing the transition table, the role
allowed to trigger the transition and the money movement tied to it.
"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.ledger_service import LedgerService
from src.app.services.notification_service import NotificationService
from src.app.repositories.rental_repository import RentalRepository
from src.app.use_cases.errors import STORAGE_ERRORS, storage_unavailable
from src.domain.chat import room_key_of
from src.domain.rental import Rental
from src.domain.rental_transition import (
    MonetaryEffect,
    TransitionRule,
    allowed_next_statuses,
    find_transition,
)
from src.domain.wallet_transaction import TransactionType
from .dtos import ApplyTransitionCommandDTO, RentalResponseDTO

logger = logging.getLogger(__name__)


class ApplyTransition:
    """
    Use Case: Apply a status transition to a rental

    Business Rules:
    1. Only (from, to) pairs present in the transition table are legal,
       whatever the actor
    2. Only the owner or the borrower of the rental may act, and only in the
       role the transition requires
    3. accepted -> paid debits the borrower total_fee + deposit_held
       (one PAYMENT transaction); insufficient funds abort the transition
    4. returned -> completed refunds the deposit to the borrower (REFUND)
       and pays the fee to the owner (EARNING) in the same unit of work
    5. The status write is a compare-and-set on (status, version); losing
       it rolls back the money movement too
    6. The system chat message is sent after commit and never affects
       the result

    Flow:
    1. Load rental with lock (SELECT FOR UPDATE)
    2. Look up transition rule
    3. Resolve actor role and check it
    4. Apply monetary effect through the ledger
    5. Compare-and-set status, commit
    6. Emit system message (best effort)
    7. Return updated rental
    """

    def __init__(
        self,
        uow: UnitOfWork,
        rental_repo: RentalRepository,
        ledger: LedgerService,
        notification_service: Optional[NotificationService] = None,
    ):
        self.uow = uow
        self.rental_repo = rental_repo
        self.ledger = ledger
        self.notification_service = notification_service

    async def execute(self, command: ApplyTransitionCommandDTO) -> Result[RentalResponseDTO]:
        """
        Execute a rental status transition

        Args:
            command: ApplyTransitionCommandDTO with rental_id, target_status, actor_id

        Returns:
            Result[RentalResponseDTO]: Updated rental or error

        Errors:
            RENTAL_NOT_FOUND, INVALID_TRANSITION, UNAUTHORIZED, FORBIDDEN,
            INSUFFICIENT_FUNDS, CONFLICT_RETRY, STORAGE_UNAVAILABLE
        """
        try:
            # Step 1: Load rental with pessimistic lock
            rental = await self.rental_repo.get_by_id(command.rental_id, for_update=True)
            if not rental:
                return await self._fail(
                    Error(
                        code="RENTAL_NOT_FOUND",
                        message=f"Rental {command.rental_id} not found",
                    )
                )

            # Step 2: Transition table lookup
            rule = find_transition(rental.status, command.target_status)
            if rule is None:
                allowed = ", ".join(s.value for s in allowed_next_statuses(rental.status)) or "none"
                return await self._fail(
                    Error(
                        code="INVALID_TRANSITION",
                        message=(
                            f"Cannot change rental status from {rental.status.value} "
                            f"to {command.target_status.value}"
                        ),
                        reason=f"allowed next statuses: {allowed}",
                    )
                )

            # Step 3: Actor role
            role = rental.role_of(command.actor_id)
            if role is None:
                return await self._fail(
                    Error(
                        code="UNAUTHORIZED",
                        message="Only the owner or the borrower can change this rental",
                    )
                )
            if role != rule.actor:
                return await self._fail(
                    Error(
                        code="FORBIDDEN",
                        message=f"Only the {rule.actor.value} can perform this action",
                    )
                )

            from_status = rental.status

            # Step 4: Money movement, inside the same unit of work
            effect_result = await self._apply_monetary_effect(rental, rule)
            if effect_result.is_err():
                return await self._fail(effect_result.error)

            # Step 5: Compare-and-set status
            swapped = await self.rental_repo.compare_and_set_status(rental, rule.to_status)
            if not swapped:
                logger.warning(
                    f"Rental {command.rental_id} changed concurrently, "
                    f"{from_status.value} -> {rule.to_status.value} rejected"
                )
                return await self._fail(
                    Error(
                        code="CONFLICT_RETRY",
                        message="Rental was modified by another request, reload and retry",
                    )
                )

            await self.uow.commit()

        except STORAGE_ERRORS as e:
            await self.uow.rollback()
            logger.error(f"Storage unavailable during rental {command.rental_id} transition: {e}")
            return Return.err(storage_unavailable(e))
        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Rental {command.rental_id} transition failed")
            return Return.err(
                Error(
                    code="TRANSITION_FAILED",
                    message="Failed to change rental status",
                    reason=str(e),
                )
            )

        logger.info(
            f"Rental {rental.id}: {from_status.value} -> {rental.status.value} "
            f"by {role.value} {command.actor_id}"
        )

        # Step 6: Best effort notification
        await self._notify(rental, rule)

        return Return.ok(RentalResponseDTO.from_entity(rental))

    async def _apply_monetary_effect(self, rental: Rental, rule: TransitionRule) -> Result[None]:
        if rule.effect == MonetaryEffect.COLLECT_PAYMENT:
            payment = await self.ledger.debit(
                rental.borrower_id,
                rental.payment_amount,
                TransactionType.PAYMENT,
                f"Rental fee {rental.total_fee} + deposit {rental.deposit_held}",
                related_rental_id=rental.id,
            )
            if payment.is_err():
                return Return.err(payment.error)

        elif rule.effect == MonetaryEffect.SETTLE:
            if rental.deposit_held > 0:
                refund = await self.ledger.credit(
                    rental.borrower_id,
                    rental.deposit_held,
                    TransactionType.REFUND,
                    f"Deposit refund {rental.deposit_held}",
                    related_rental_id=rental.id,
                )
                if refund.is_err():
                    return Return.err(refund.error)

            earning = await self.ledger.credit(
                rental.owner_id,
                rental.total_fee,
                TransactionType.EARNING,
                f"Rental earning {rental.total_fee}",
                related_rental_id=rental.id,
            )
            if earning.is_err():
                return Return.err(earning.error)

        return Return.ok(None)

    async def _notify(self, rental: Rental, rule: TransitionRule) -> None:
        if self.notification_service is None:
            return
        room_key = room_key_of(rental.borrower_id, rental.owner_id, rental.item_id)
        try:
            delivered = await self.notification_service.emit_system_message(
                room_key, rule.system_message
            )
            if not delivered:
                logger.warning(f"System message for rental {rental.id} was not delivered")
        except Exception as e:
            logger.error(f"Failed to emit system message for rental {rental.id}: {e}")

    async def _fail(self, error: Error) -> Result[RentalResponseDTO]:
        # Releases the row lock and discards any partial ledger writes
        await self.uow.rollback()
        return Return.err(error)
