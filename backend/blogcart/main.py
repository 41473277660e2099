"""blogcart API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BlogcartError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database engine created on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module's imports small
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from blogcart.api.error_handlers import register_error_handlers
from blogcart.api.routes import articles, cart, catalog, health, users
from blogcart.config import get_settings
from blogcart.infrastructure.database import close_db, init_db
from blogcart.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    logger.info("blogcart API started")
    try:
        yield
    finally:
        await close_db()
        logger.info("blogcart API shut down")


app = FastAPI(
    title="blogcart API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(articles.router)
app.include_router(users.router)
app.include_router(catalog.router)
app.include_router(cart.router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Hello, World!"
