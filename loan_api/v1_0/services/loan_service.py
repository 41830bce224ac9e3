from datetime import datetime, timezone
from typing import Callable, List
from uuid import uuid4

from fastapi import HTTPException, status

from loan_api.core.logger import logger
from loan_api.v1_0.entities import LoanDTO, LoanListDTO
from loan_api.v1_0.models import Loan
from loan_api.v1_0.repositories import LoanRepository
from loan_api.v1_0.schemas import LoanCreate


def _new_loan_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LoanService:
    def __init__(
        self,
        loan_repository: LoanRepository,
        id_factory: Callable[[], str] = _new_loan_id,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.loan_repository = loan_repository
        self.id_factory = id_factory
        self.clock = clock

    def _require(self, loan_id: str) -> Loan:
        """
        Ensure that a loan exists; otherwise raise 404.

        Args:
            loan_id: Loan identifier to fetch.

        Returns:
            Stored loan.

        Raises:
            HTTPException: With 404 status if the loan does not exist.
        """
        loan = self.loan_repository.get_by_id(loan_id)
        if not loan:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Loan with ID '{loan_id}' not found",
            )
        return loan

    def create(self, payload: LoanCreate) -> LoanDTO:
        """
        Create a new loan record.

        The payload is already validated (non-blank borrower name,
        positive amounts). A fresh identifier and the current UTC time
        are assigned here.

        Args:
            payload: LoanCreate data with borrower name and both amounts.

        Returns:
            LoanDTO for the created loan.
        """
        logger.info(
            "[LoanService] Creating loan: %s",
            payload.model_dump(),
        )
        loan = Loan(
            id=self.id_factory(),
            borrower_name=payload.borrower_name,
            funding_amount=payload.funding_amount,
            repayment_amount=payload.repayment_amount,
            created_at=self.clock(),
        )
        self.loan_repository.insert(loan)
        logger.info(
            "[LoanService] Loan created ID=%s",
            loan.id,
        )
        return LoanDTO.from_model(loan)

    def get(self, loan_id: str) -> LoanDTO:
        """
        Retrieve a single loan by ID.

        Raises:
            HTTPException: 404 if loan does not exist.
        """
        logger.debug(
            "[LoanService] Get loan ID=%s",
            loan_id,
        )
        return LoanDTO.from_model(self._require(loan_id))

    def list_by_borrower(self, borrower_name: str) -> List[LoanDTO]:
        """
        List the loans of one borrower, matched ignoring case.

        An empty result is reported as 404, unlike ``list_all``.

        Raises:
            HTTPException: 404 if no loan matches.
        """
        logger.debug(
            "[LoanService] List loans borrower=%s",
            borrower_name,
        )
        rows = self.loan_repository.list_by_borrower_name(borrower_name)
        if not rows:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No loans found for borrower '{borrower_name}'",
            )
        return [LoanDTO.from_model(l) for l in rows]

    def list_all(self) -> LoanListDTO:
        """
        List all loans with the total count. Never fails.
        """
        logger.debug("[LoanService] List all loans")
        rows = self.loan_repository.list_all()
        return LoanListDTO(
            total_count=len(rows),
            loans=[LoanDTO.from_model(l) for l in rows],
        )

    def delete(self, loan_id: str) -> bool:
        """
        Delete a loan by ID.

        Returns:
            True if the loan was deleted.

        Raises:
            HTTPException: 404 if the loan does not exist.
        """
        logger.warning(
            "[LoanService] Delete loan ID=%s",
            loan_id,
        )
        if not self.loan_repository.delete_by_id(loan_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Loan with ID '{loan_id}' not found",
            )
        return True
