"""LoanService — id/time assignment and not-found signalling over the store."""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from decimal import Decimal
from itertools import count

import pytest
from fastapi import HTTPException

from loan_api.v1_0.repositories import LoanRepository
from loan_api.v1_0.schemas import LoanCreate
from loan_api.v1_0.services import LoanService

FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


def payload(name="Alice", funding="1000.00", repayment="1100.00"):
    return LoanCreate(
        borrowerName=name,
        fundingAmount=Decimal(funding),
        repaymentAmount=Decimal(repayment),
    )


@pytest.fixture
def repo():
    return LoanRepository()


@pytest.fixture
def service(repo):
    seq = count(1)
    return LoanService(
        loan_repository=repo,
        id_factory=lambda: f"loan-{next(seq)}",
        clock=lambda: FIXED_NOW,
    )


def test_create_assigns_id_and_timestamp(service, repo):
    dto = service.create(payload())
    assert dto.loan_id == "loan-1"
    assert dto.created_at == FIXED_NOW
    assert dto.borrower_name == "Alice"
    assert dto.funding_amount == Decimal("1000.00")
    assert dto.repayment_amount == Decimal("1100.00")
    assert repo.count() == 1


def test_get_returns_what_create_returned(service):
    created = service.create(payload())
    assert service.get(created.loan_id) == created


def test_get_unknown_raises_404(service):
    with pytest.raises(HTTPException) as exc:
        service.get("nope")
    assert exc.value.status_code == 404
    assert "nope" in exc.value.detail


def test_list_by_borrower_without_match_raises_404(service):
    with pytest.raises(HTTPException) as exc:
        service.list_by_borrower("NoSuchName")
    assert exc.value.status_code == 404


def test_list_by_borrower_returns_matches(service):
    service.create(payload("Bob Smith"))
    service.create(payload("Alice"))
    rows = service.list_by_borrower("bob smith")
    assert [r.borrower_name for r in rows] == ["Bob Smith"]


def test_list_all_on_empty_store_is_success(service):
    result = service.list_all()
    assert result.total_count == 0
    assert result.loans == []


def test_total_count_tracks_creates_and_deletes(service):
    a = service.create(payload("A"))
    service.create(payload("B"))
    assert service.list_all().total_count == 2
    service.delete(a.loan_id)
    assert service.list_all().total_count == 1


def test_delete_is_terminal(service):
    created = service.create(payload())
    assert service.delete(created.loan_id) is True
    with pytest.raises(HTTPException) as exc:
        service.get(created.loan_id)
    assert exc.value.status_code == 404
    with pytest.raises(HTTPException) as exc:
        service.delete(created.loan_id)
    assert exc.value.status_code == 404


def test_default_ids_are_unique_under_concurrency():
    service = LoanService(loan_repository=LoanRepository())

    with ThreadPoolExecutor(max_workers=8) as pool:
        dtos = list(pool.map(lambda _: service.create(payload()), range(400)))

    assert len({d.loan_id for d in dtos}) == 400
    assert service.list_all().total_count == 400


def test_default_clock_is_utc():
    service = LoanService(loan_repository=LoanRepository())
    dto = service.create(payload())
    assert dto.created_at.tzinfo is not None
    assert dto.created_at.utcoffset().total_seconds() == 0
