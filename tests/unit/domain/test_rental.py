"""Unit tests for Rental domain entity"""

from datetime import date

from src.domain.rental import ActorRole, Rental, RentalStatus


def make_rental(**overrides) -> Rental:
    values = dict(
        id=1,
        item_id=10,
        borrower_id="borrower",
        owner_id="owner",
        status=RentalStatus.REQUESTED,
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 3),
        total_fee=20000,
        deposit_held=50000,
    )
    values.update(overrides)
    return Rental(**values)


class TestRental:
    def test_defaults(self):
        rental = make_rental()

        assert rental.version == 1
        assert rental.is_delivery is False
        assert rental.delivery_fee == 0

    def test_payment_amount_is_fee_plus_deposit(self):
        assert make_rental().payment_amount == 70000
        assert make_rental(deposit_held=0).payment_amount == 20000

    def test_role_of(self):
        rental = make_rental()

        assert rental.role_of("owner") == ActorRole.OWNER
        assert rental.role_of("borrower") == ActorRole.BORROWER
        assert rental.role_of("stranger") is None

    def test_is_party(self):
        rental = make_rental()

        assert rental.is_party("owner")
        assert rental.is_party("borrower")
        assert not rental.is_party("stranger")
