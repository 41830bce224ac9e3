from decimal import Decimal
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

class LoanCreate(BaseModel):
    """Create schema for a loan."""
    borrower_name: str = Field(..., min_length=1, description="Borrower name, case preserved")
    funding_amount: Decimal = Field(..., gt=0, description="Amount lent to the borrower")
    repayment_amount: Decimal = Field(..., gt=0, description="Amount the borrower pays back")

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "str_strip_whitespace": True,
        "json_schema_extra": {
            "example": {
                "borrowerName": "Alice",
                "fundingAmount": 1000.00,
                "repaymentAmount": 1100.00,
            }
        },
    }
