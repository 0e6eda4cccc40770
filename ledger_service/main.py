import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ledger_service import __version__
from ledger_service.core.container import ApplicationContainer, get_container
from ledger_service.core.logging_config import setup_logging
from ledger_service.infrastructure.database import init_db, ping
from ledger_service.interfaces.http import create_api_router
from ledger_service.interfaces.http.errors import register_exception_handlers
from ledger_service.schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    if container.settings.database.create_schema:
        await init_db(container.engine)
    logger.info("Ledger service started (environment=%s)", container.settings.environment)
    yield
    await container.dispose()
    logger.info("Ledger service stopped")


def create_app(container: ApplicationContainer | None = None) -> FastAPI:
    container = container or get_container()
    settings = container.settings
    setup_logging(settings.logging)

    app = FastAPI(
        title=settings.project_name,
        description="Wallet balances and atomic transfers",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health_check(request: Request) -> HealthResponse:
        reachable = await ping(request.app.state.container.engine)
        return HealthResponse(
            status="healthy" if reachable else "degraded",
            app_name=settings.project_name,
            version=__version__,
            database="ok" if reachable else "unreachable",
        )

    return app
