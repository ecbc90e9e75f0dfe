"""Wallet use cases"""
from .get_wallet import GetWallet
from .top_up_wallet import TopUpWallet
from .withdraw_wallet import WithdrawWallet
from .reconcile_ledger import ReconcileLedger
from .dtos import (
    TopUpCommandDTO,
    WithdrawCommandDTO,
    TransactionDTO,
    WalletResponseDTO,
    LedgerDiscrepancyDTO,
    ReconciliationResultDTO,
)

__all__ = [
    "GetWallet",
    "TopUpWallet",
    "WithdrawWallet",
    "ReconcileLedger",
    "TopUpCommandDTO",
    "WithdrawCommandDTO",
    "TransactionDTO",
    "WalletResponseDTO",
    "LedgerDiscrepancyDTO",
    "ReconciliationResultDTO",
]
