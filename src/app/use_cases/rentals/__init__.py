"""Rental lifecycle use cases"""
from .create_rental import CreateRental
from .apply_transition import ApplyTransition
from .get_rental import GetRental
from .list_rentals import ListRentals
from .dtos import (
    CreateRentalCommandDTO,
    ApplyTransitionCommandDTO,
    RentalResponseDTO,
    ListRentalsResponseDTO,
)

__all__ = [
    "CreateRental",
    "ApplyTransition",
    "GetRental",
    "ListRentals",
    "CreateRentalCommandDTO",
    "ApplyTransitionCommandDTO",
    "RentalResponseDTO",
    "ListRentalsResponseDTO",
]
