"""Data Point Local SEO API - Local search readiness audits."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from analyzers.base import InputError
from api.routes import analyze_router, health_router, ui_router
from config import get_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send application logs to stderr in a single consistent format."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Code before `yield` runs on startup.
    Code after `yield` runs on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    if not settings.google_places_api_key:
        logger.warning("GOOGLE_PLACES_API_KEY not set, listing lookups will be skipped")
    logger.info(f"Starting {settings.app_name}...")
    yield
    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title="Data Point Local SEO API",
    description="Local search readiness audits for small-business websites.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InputError)
async def input_error_handler(request: Request, exc: InputError) -> JSONResponse:
    """Reject incomplete requests with a 400 and a flat error body."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": str(exc)},
    )


# Register routers
app.include_router(health_router, prefix="/api")
app.include_router(analyze_router, prefix="/api")
app.include_router(ui_router)


def run() -> None:
    """Start the API server on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
