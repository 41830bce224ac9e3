from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from loan_api.core.logger import logger


def register_error_handlers(app: FastAPI) -> None:
    """Register the global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Report invalid input as 400 with one entry per failing field."""
        logger.warning(
            "[Validation] %s %s: %s",
            request.method,
            request.url.path,
            exc.errors(),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc),
        )


def _field_name(loc) -> str:
    # ("body", "fundingAmount") -> "fundingAmount"
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


def build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "detail": "Invalid request data",
        "errors": [
            {
                "field": _field_name(e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
