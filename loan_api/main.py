from contextlib import asynccontextmanager
from typing import cast

from fastapi import FastAPI, APIRouter, Request
from fastapi.middleware.cors import CORSMiddleware

from loan_api.core.settings import settings
from loan_api.core.logger import logger, set_level
from loan_api.core.error_handlers import register_error_handlers
from loan_api.v1_0.v1_router import v1_router
from loan_api.v1_0.repositories import LoanRepository
from loan_api.app_containers import ApplicationContainer
API_PREFIX = settings.API_PREFIX


def _loan_repository(app: FastAPI) -> LoanRepository:
    container = cast(ApplicationContainer, app.state.container)
    return container.api_container.loan_repository()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{settings.APP_NAME} starting in {settings.APP_ENV}")
    try:
        yield
    finally:
        # el almacen vive solo en memoria: se pierde al apagar
        repo = _loan_repository(app)
        logger.info(f"{settings.APP_NAME} shutdown, discarding {repo.count()} loans")
        repo.clear()


def _add_cors(app: FastAPI) -> None:
    """Let the browser client call the API from its own origin."""
    origins = settings.CORS_ORIGINS_LIST
    # credentials are only allowed with an explicit origin list
    wildcard = "*" in origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=not wildcard,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )
    logger.info("[CORS] origins=%s credentials=%s", origins, not wildcard)


def create_app() -> FastAPI:
    container = ApplicationContainer()
    if settings.DEBUG:
        set_level("DEBUG")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        openapi_url=f"{API_PREFIX}/openapi.json",
        docs_url=f"{API_PREFIX}/docs",
        redoc_url=f"{API_PREFIX}/redoc",
        lifespan=lifespan,
    )

    app.state.container = container
    register_error_handlers(app)
    _add_cors(app)

    base_router = APIRouter(prefix=API_PREFIX)
    base_router.include_router(v1_router)

    @base_router.get("/", tags=["health"])
    @base_router.get("/ready", tags=["health"])
    async def ready(request: Request):
        return {
            "status": "ready",
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "env": settings.APP_ENV,
            "loans": _loan_repository(request.app).count(),
        }

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(base_router)

    return app


app = create_app()
