# app/main.py
from fastapi import FastAPI, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import init_db, close_db, ping_db
from app.core.logger import setup_logging
from app.api.error_handlers import register_error_handlers
from app.api.v1.router import api_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    await init_db()

    yield

    await close_db()


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    setup_logging("DEBUG" if settings.DEBUG else settings.LOG_LEVEL)

    application = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        redoc_url=f"{settings.API_V1_PREFIX}/redoc",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)
    application.include_router(api_router, prefix=settings.API_V1_PREFIX)

    @application.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": settings.PROJECT_NAME,
            "docs": f"{settings.API_V1_PREFIX}/docs"
        }

    @application.get("/health")
    async def health():
        """Report whether the database answers."""
        if not await ping_db():
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"database": "unavailable"}
            )
        return {"database": "ok"}

    return application


app = create_app()
