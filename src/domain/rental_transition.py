"""Rental Transition Table

Static table of legal rental status transitions. Each entry names the role
allowed to trigger it, the money movement it causes and the system message
posted to the negotiation chat once it is committed.

Any (from, to) pair missing from the table is illegal for every actor.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple
from src.domain.rental import ActorRole, RentalStatus


class MonetaryEffect(str, Enum):
    """Ledger effect of a transition"""
    NONE = "none"
    COLLECT_PAYMENT = "collect_payment"  # debit borrower total_fee + deposit_held
    SETTLE = "settle"                    # refund deposit to borrower, pay fee to owner


@dataclass(frozen=True)
class TransitionRule:
    from_status: RentalStatus
    to_status: RentalStatus
    actor: ActorRole
    effect: MonetaryEffect
    system_message: str


_RULES = (
    TransitionRule(
        RentalStatus.REQUESTED, RentalStatus.ACCEPTED, ActorRole.OWNER,
        MonetaryEffect.NONE, "Rental request accepted",
    ),
    TransitionRule(
        RentalStatus.REQUESTED, RentalStatus.CANCELLED, ActorRole.BORROWER,
        MonetaryEffect.NONE, "Rental request cancelled",
    ),
    TransitionRule(
        RentalStatus.ACCEPTED, RentalStatus.PAID, ActorRole.BORROWER,
        MonetaryEffect.COLLECT_PAYMENT, "Payment completed. Deposit is held in escrow",
    ),
    TransitionRule(
        RentalStatus.PAID, RentalStatus.RENTING, ActorRole.OWNER,
        MonetaryEffect.NONE, "Rental started",
    ),
    TransitionRule(
        RentalStatus.RENTING, RentalStatus.RETURNED, ActorRole.BORROWER,
        MonetaryEffect.NONE, "Item returned",
    ),
    TransitionRule(
        RentalStatus.RETURNED, RentalStatus.COMPLETED, ActorRole.OWNER,
        MonetaryEffect.SETTLE, "Rental completed. Deposit refunded",
    ),
)

TRANSITIONS: Dict[Tuple[RentalStatus, RentalStatus], TransitionRule] = {
    (rule.from_status, rule.to_status): rule for rule in _RULES
}

TERMINAL_STATUSES: FrozenSet[RentalStatus] = frozenset(
    status for status in RentalStatus
    if not any(rule.from_status == status for rule in _RULES)
)


def find_transition(
    from_status: RentalStatus, to_status: RentalStatus
) -> Optional[TransitionRule]:
    return TRANSITIONS.get((from_status, to_status))


def allowed_next_statuses(from_status: RentalStatus) -> Tuple[RentalStatus, ...]:
    return tuple(rule.to_status for rule in _RULES if rule.from_status == from_status)
