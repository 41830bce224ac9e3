from .loan import Loan, borrower_key

__all__ = [
    "Loan",
    "borrower_key",
]
