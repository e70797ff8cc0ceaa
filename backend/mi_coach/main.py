"""FastAPI application entry point."""

import logging
import random
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from mi_coach.config import settings
from mi_coach.routes import chat, feedback, history, patients, scenarios, sessions
from mi_coach.services.history import InMemorySessionArchive
from mi_coach.services.tiers import InMemoryUsageStore

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events for startup/shutdown."""
    app.state.usage_store = InMemoryUsageStore()
    app.state.session_archive = InMemorySessionArchive()
    if settings.random_seed is not None:
        app.state.rng = random.Random(settings.random_seed)
        logger.info("Patient generation seeded with %d", settings.random_seed)
    else:
        app.state.rng = None

    yield  # Application runs here


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        # Speech input in the practice view needs the microphone
        response.headers["Permissions-Policy"] = (
            "geolocation=(), microphone=(self), camera=()"
        )
        return response


app = FastAPI(
    title="MI Coach",
    description="Motivational-interviewing practice against simulated patients",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(SecurityHeadersMiddleware)

# Parse comma-separated origins from config
_cors_origins = [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

app.include_router(scenarios.router, prefix="/api")
app.include_router(patients.router, prefix="/api")
app.include_router(chat.router, prefix="/api")
app.include_router(feedback.router, prefix="/api")
app.include_router(sessions.router, prefix="/api")
app.include_router(history.router, prefix="/api")


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API info."""
    return {
        "name": "MI Coach API",
        "version": "0.1.0",
        "docs": "/docs",
    }


def run() -> None:
    """Serve the API with uvicorn using host and port from settings."""
    uvicorn.run(
        "mi_coach.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
