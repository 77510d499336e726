from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from contextlib import asynccontextmanager
from newsdesk.core.config import settings
from newsdesk.core.database import engine, Base
from newsdesk.core.errors import NewsdeskError, newsdesk_error_handler
from newsdesk.core.logging_config import (
    setup_logging,
    CorrelationIdMiddleware,
    log_audit_event,
)
from newsdesk.api.endpoints import auth, news_lists, newspapers, views
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
import logging

# Import models so their tables are registered on Base.metadata
import newsdesk.models  # noqa: F401

audit_logger = setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        if settings.ENABLE_HSTS and settings.is_production:
            response.headers["Strict-Transport-Security"] = (
                f"max-age={settings.HSTS_MAX_AGE}; includeSubDomains"
            )

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response


limiter = Limiter(key_func=get_remote_address, default_limits=[settings.RATE_LIMIT_DEFAULT])


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting Newsdesk application...")

    if settings.DEV_MODE:
        logger.warning(
            "DEV_MODE is enabled: /api/auth/dev-login issues tokens without a password. "
            "Never use this in production!"
        )

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")

    yield

    logger.info("Shutting down Newsdesk application...")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Newsdesk - News List Administration",
        description="Curated newspaper lists with author and category filters",
        version="1.0.0",
        lifespan=lifespan,
    )

    # First, so all logs carry correlation IDs
    app.add_middleware(CorrelationIdMiddleware)

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    app.add_middleware(SecurityHeadersMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NewsdeskError, newsdesk_error_handler)

    include_routers(app)

    @app.get("/")
    def root():
        return {
            "name": "Newsdesk",
            "version": "1.0.0",
            "description": "News List Administration",
        }

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


def include_routers(app: FastAPI) -> None:
    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(news_lists.router, prefix="/api/news-lists", tags=["news-lists"])
    app.include_router(newspapers.router, prefix="/api/newspapers", tags=["newspapers"])
    app.include_router(views.router, prefix=settings.NEWS_LIST_BASE_PATH, tags=["views"])


app = create_app()

log_audit_event(
    event_type="app.startup",
    message=f"Newsdesk application starting (production={settings.is_production})",
    event_category="system",
    production=settings.is_production,
    debug=settings.DEBUG,
    dev_mode=settings.DEV_MODE,
)
