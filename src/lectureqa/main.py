"""LectureQA FastAPI Application Entry Point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from lectureqa import __version__
from lectureqa.config import settings
from lectureqa.exception_handlers import register_exception_handlers
from lectureqa.middleware import configure_logging, register_middleware
from lectureqa.routers import (
    ask_router,
    catalog_router,
    questions_router,
    teacher_router,
    users_router,
)
from lectureqa.schemas import HealthResponse


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager."""
    configure_logging()
    logger.info(
        "Application starting",
        environment=settings.environment,
        debug=settings.debug,
    )
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="LectureQA API",
    description="Course Q&A with AI answers and instructor follow-up",
    version=__version__,
    lifespan=lifespan,
)

register_middleware(app)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(ask_router, prefix="/api")
app.include_router(catalog_router, prefix="/api")
app.include_router(questions_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(teacher_router, prefix="/api")


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check endpoint",
)
async def health_check() -> HealthResponse:
    """Health check endpoint for container orchestration."""
    return HealthResponse(
        status="healthy",
        service="lectureqa-api",
        version=__version__,
    )
