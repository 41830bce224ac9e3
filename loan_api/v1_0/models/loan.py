from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Loan:
    """
    A loan as held by the in-memory store.

    Instances are never mutated after creation: the only lifecycle
    transitions are insert and delete.
    """
    id: str
    borrower_name: str
    funding_amount: Decimal
    repayment_amount: Decimal
    created_at: datetime

    @property
    def borrower_key(self) -> str:
        """Locale-independent lookup key for the borrower name."""
        return borrower_key(self.borrower_name)


def borrower_key(name: str) -> str:
    # names are stored stripped, so lookups strip too
    return name.strip().casefold()
