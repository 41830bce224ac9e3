from .loan_schema import LoanCreate

__all__ = [
    "LoanCreate",
]
