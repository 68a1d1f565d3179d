"""FastAPI application entry point.

Serves the initial application state. The CMS data set is fetched on the
first request and reused for the lifetime of the process.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cms_comparison import __version__
from cms_comparison.api.state import router as state_router
from cms_comparison.config.settings import Environment, get_settings
from cms_comparison.ingestion.transport import HttpxFetch

settings = get_settings()

_LOG_NAME_TO_LEVEL: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# --- Structured logging ---
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if settings.ENVIRONMENT == Environment.DEV
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        _LOG_NAME_TO_LEVEL[settings.LOG_LEVEL.value],
    ),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)
logging.basicConfig(level=_LOG_NAME_TO_LEVEL[settings.LOG_LEVEL.value])

logger: structlog.stdlib.BoundLogger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the HTTP client created by the first request, if any."""
    logger.info("startup", base_url=settings.CMS_REPO_BASE_URL)
    yield
    fetch = getattr(app.state, "fetch", None)
    if isinstance(fetch, HttpxFetch):
        await fetch.aclose()
    logger.info("shutdown")


# --- FastAPI app ---
app = FastAPI(
    title="CMS Comparison API",
    description="Validated headless CMS comparison data and initial filter state.",
    version=__version__,
    lifespan=lifespan,
)

# --- CORS middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.ENVIRONMENT == Environment.DEV else [],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# --- Routers ---
app.include_router(state_router)


@app.get("/health")
async def health() -> dict:
    """Liveness check; reports whether the data set fetch has started."""
    cache = getattr(app.state, "cms_cache", None)
    return {
        "status": "ok",
        "version": __version__,
        "cms_data_loaded": bool(cache and cache.is_primed),
    }
