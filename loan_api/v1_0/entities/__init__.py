from .loan_DTO import LoanDTO, LoanListDTO

__all__ = [
    "LoanDTO",
    "LoanListDTO",
]
