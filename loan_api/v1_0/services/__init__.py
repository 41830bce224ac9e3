from .loan_service import LoanService

__all__ = [
    "LoanService",
]
