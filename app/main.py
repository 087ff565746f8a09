from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import router
from app.config.settings import Settings
from app.extraction.service import ExtractionService, build_service
from app.logging.logger import Log


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # Shutdown: release the strategy worker pool.
    Log.info("Shutting down extraction API")
    app.state.extraction_service.close()


def create_app(
    settings: Settings | None = None,
    service: ExtractionService | None = None,
) -> FastAPI:
    """Build the HTTP application; strategies are constructed here, once."""
    settings = settings or Settings()
    app = FastAPI(title="Anuvadakah Extraction API", version="1.0.0", lifespan=lifespan)
    app.state.extraction_service = service or build_service(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.include_router(router)
    # The web client calls the same endpoints under /api.
    app.include_router(router, prefix="/api")
    return app


def main() -> None:
    """Entry point: load settings -> configure logging -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)
    Log.info(f"Starting extraction API on {settings.host}:{settings.port}", env=settings.app_env)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
