from .base_repository import BaseRepository
from .loan_repository import LoanRepository
__all__ = [
    "BaseRepository",
    "LoanRepository",
]
