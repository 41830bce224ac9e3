from datetime import datetime
from decimal import Decimal
from typing import Annotated, List

from pydantic import BaseModel, PlainSerializer
from pydantic.alias_generators import to_camel

from loan_api.v1_0.models import Loan

# JSON clients read amounts as numbers
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class LoanDTO(BaseModel):
    """Loan response DTO."""
    loan_id: str
    borrower_name: str
    funding_amount: Amount
    repayment_amount: Amount
    created_at: datetime

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @classmethod
    def from_model(cls, l: Loan) -> "LoanDTO":
        return cls(
            loan_id=l.id,
            borrower_name=l.borrower_name,
            funding_amount=l.funding_amount,
            repayment_amount=l.repayment_amount,
            created_at=l.created_at,
        )


class LoanListDTO(BaseModel):
    """Every loan in the store plus the total."""
    total_count: int
    loans: List[LoanDTO]

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
