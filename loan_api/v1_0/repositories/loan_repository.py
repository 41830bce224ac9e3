from typing import List

from loan_api.v1_0.models import Loan, borrower_key
from .base_repository import BaseRepository

class LoanRepository(BaseRepository[Loan]):
    def insert(self, loan: Loan) -> None:
        """
        Store a new Loan. The id must not be present yet.
        """
        self.add(loan)

    def list_by_borrower_name(self, borrower_name: str) -> List[Loan]:
        """
        Return the Loans whose borrower name equals ``borrower_name``
        ignoring case. Whole-string match only; empty list if none.
        """
        key = borrower_key(borrower_name)
        return self.list_where(lambda l: l.borrower_key == key)
