import asyncio
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote

import httpx

from loan_api.core.logger import logger

Number = Union[int, float, Decimal]


def _segment(value: str) -> str:
    # a single path segment, reserved characters escaped
    return quote(value, safe="")


class LoanApiError(RuntimeError):
    """Non-2xx answer from the loan API."""

    def __init__(self, status_code: int, detail: Any) -> None:
        super().__init__(f"loan_api_error[{status_code}]: {detail}")
        self.status_code = status_code
        self.detail = detail


class LoanNotFoundError(LoanApiError):
    pass


class LoanApiClient:
    """
    Async client for the ``/loans`` endpoints.

    Args:
        base_url: API root including the prefix, e.g. ``http://localhost:8000/api``.
        timeout: Per request timeout in seconds.
        max_retries: Extra attempts for ``list_loans(retry=True)``.
        backoff: Initial delay in seconds, doubled after each failed attempt.
        transport: Optional httpx transport (tests, ASGI apps).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 15,
        max_retries: int = 3,
        backoff: float = 0.5,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff = backoff
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base,
            timeout=self.timeout,
            transport=self.transport,
        )

    @staticmethod
    def _detail(r: httpx.Response) -> Any:
        try:
            data = r.json()
        except ValueError:
            return r.text
        if isinstance(data, dict) and "detail" in data:
            return data["detail"]
        return data

    def _raise_for_status(self, r: httpx.Response) -> None:
        if r.status_code < 300:
            return
        detail = self._detail(r)
        if r.status_code == 404:
            raise LoanNotFoundError(r.status_code, detail)
        raise LoanApiError(r.status_code, detail)

    async def create_loan(
        self,
        borrower_name: str,
        funding_amount: Number,
        repayment_amount: Number,
    ) -> Dict[str, Any]:
        body = {
            "borrowerName": borrower_name,
            "fundingAmount": float(funding_amount),
            "repaymentAmount": float(repayment_amount),
        }
        async with self._client() as client:
            r = await client.post("/loans", json=body)
        self._raise_for_status(r)
        return r.json()

    async def get_loan(self, loan_id: str) -> Dict[str, Any]:
        async with self._client() as client:
            r = await client.get(f"/loans/{_segment(loan_id)}")
        self._raise_for_status(r)
        return r.json()

    async def list_by_borrower(self, borrower_name: str) -> List[Dict[str, Any]]:
        """
        Loans of one borrower. Raises LoanNotFoundError when there are none.
        """
        async with self._client() as client:
            r = await client.get(f"/loans/borrower/{_segment(borrower_name)}")
        self._raise_for_status(r)
        return r.json()

    async def delete_loan(self, loan_id: str) -> None:
        async with self._client() as client:
            r = await client.delete(f"/loans/{_segment(loan_id)}")
        self._raise_for_status(r)

    async def list_loans(self, retry: bool = False) -> Dict[str, Any]:
        """
        Every loan plus ``totalCount``.

        With ``retry=True`` connection errors and 5xx answers are retried
        up to ``max_retries`` times with exponential backoff, as done for
        the first load of the listing page.
        """
        attempts = 1 + (self.max_retries if retry else 0)
        delay = self.backoff
        for attempt in range(1, attempts + 1):
            try:
                async with self._client() as client:
                    r = await client.get("/loans")
                if r.status_code < 500 or attempt == attempts:
                    self._raise_for_status(r)
                    return r.json()
                logger.warning(
                    "[LoanApiClient] list_loans attempt=%s status=%s",
                    attempt,
                    r.status_code,
                )
            except httpx.TransportError as e:
                if attempt == attempts:
                    raise
                logger.warning(
                    "[LoanApiClient] list_loans attempt=%s error=%s",
                    attempt,
                    e,
                )
            await asyncio.sleep(delay)
            delay *= 2
        raise RuntimeError("unreachable")
