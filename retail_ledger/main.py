from contextlib import asynccontextmanager
from typing import cast, Optional

from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from retail_ledger.core.settings import settings
from retail_ledger.core.logger import logger
from retail_ledger.v1_0.v1_router import v1_router
from retail_ledger.app_containers import ApplicationContainer
API_PREFIX = getattr(settings, "API_PREFIX", "/api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = cast(ApplicationContainer, app.state.container)
    persistence = container.api_container.persistence_service()
    report = persistence.load_all()
    logger.info(
        f"{settings.APP_NAME} starting in {settings.APP_ENV} "
        f"(customers={report.customers}, invoices={report.invoices}, inventory={report.inventory})"
    )
    try:
        yield
    finally:
        if settings.AUTOSAVE_ON_SHUTDOWN:
            persistence.save_all()
        logger.info(f"{settings.APP_NAME} shutdown")


def create_app(container: Optional[ApplicationContainer] = None) -> FastAPI:
    container = container or ApplicationContainer()

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

    origins = settings.CORS_ORIGINS_LIST
    allow_credentials = True

    if "*" in origins:
        # wildcard + credentials is not valid CORS
        allow_credentials = False

    logger.info("CORS origins=%s allow_credentials=%s", origins, allow_credentials)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    base_router = APIRouter(prefix=API_PREFIX)
    base_router.include_router(v1_router)

    @base_router.get("/", tags=["health"])
    @base_router.get("/ready", tags=["health"])
    async def ready():
        return {
            "message": "ready",
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "env": settings.APP_ENV,
            "prefix": API_PREFIX,
        }

    app.include_router(base_router)

    return app


app = create_app()
