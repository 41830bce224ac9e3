from typing import List
from fastapi import APIRouter, HTTPException, Depends, Request, Response, status
from dependency_injector.wiring import inject, Provide

from loan_api.app_containers import ApplicationContainer
from loan_api.core.logger import logger

from loan_api.v1_0.schemas import LoanCreate
from loan_api.v1_0.entities import LoanDTO, LoanListDTO
from loan_api.v1_0.services import LoanService

router = APIRouter(prefix="/loans", tags=["Loans"])


@router.post(
    "",
    response_model=LoanDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create loan",
)
@inject
async def create_loan(
    payload: LoanCreate,
    request: Request,
    response: Response,
    service: LoanService = Depends(
        Provide[ApplicationContainer.api_container.loan_service]
    ),
) -> LoanDTO:
    logger.info("[LoanRouter] create payload=%s", payload.model_dump())

    try:
        dto = service.create(payload)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("[LoanRouter] create error: %s", e, exc_info=True)
        raise HTTPException(
            status_code=500,
            detail="Failed to create loan",
        )

    response.headers["Location"] = str(request.url_for("get_loan", loan_id=dto.loan_id))
    return dto


@router.get(
    "/borrower/{borrower_name:path}",
    response_model=List[LoanDTO],
    summary="List loans of a borrower",
)
@inject
async def list_loans_by_borrower(
    borrower_name: str,
    service: LoanService = Depends(
        Provide[ApplicationContainer.api_container.loan_service]
    ),
):
    logger.debug(f"[LoanRouter] list_by_borrower name={borrower_name}")
    try:
        return service.list_by_borrower(borrower_name)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[LoanRouter] list_by_borrower error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to list loans")


@router.get(
    "/{loan_id}",
    response_model=LoanDTO,
    summary="Get loan by ID",
)
@inject
async def get_loan(
    loan_id: str,
    service: LoanService = Depends(
        Provide[ApplicationContainer.api_container.loan_service]
    ),
):
    logger.debug(f"[LoanRouter] get id={loan_id}")
    try:
        return service.get(loan_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[LoanRouter] get error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch loan")


@router.get(
    "",
    response_model=LoanListDTO,
    summary="List all loans",
)
@inject
async def list_loans(
    service: LoanService = Depends(
        Provide[ApplicationContainer.api_container.loan_service]
    ),
):
    logger.debug("[LoanRouter] list_all")
    try:
        return service.list_all()
    except Exception as e:
        logger.error(f"[LoanRouter] list_all error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to list loans")


@router.delete(
    "/{loan_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete loan",
)
@inject
async def delete_loan(
    loan_id: str,
    service: LoanService = Depends(
        Provide[ApplicationContainer.api_container.loan_service]
    ),
) -> Response:
    logger.warning("[LoanRouter] delete id=%s", loan_id)

    try:
        service.delete(loan_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("[LoanRouter] delete error: %s", e, exc_info=True)
        raise HTTPException(
            status_code=500,
            detail="Failed to delete loan",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
