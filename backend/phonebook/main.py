"""Phonebook API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PhonebookError → {"error": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - MongoDB connected and pinged in the lifespan; a missing MONGODB_URI or an
      unreachable server aborts startup before the port is bound

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - PhonebookService stored on app.state and handed to routes by a dependency,
      so tests override one dependency instead of patching module globals
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from phonebook.api.error_handlers import register_error_handlers
from phonebook.api.routes import health, info, persons
from phonebook.config import get_settings
from phonebook.infrastructure.database import open_mongo
from phonebook.infrastructure.observability import setup_logging
from phonebook.infrastructure.person_repository import MongoPersonRepository
from phonebook.services.phonebook import PhonebookService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    mongo = await open_mongo(settings)
    app.state.phonebook = PhonebookService(
        MongoPersonRepository(mongo.collection),
    )
    logger.info(f"Phonebook API started on port {settings.port}")
    yield
    logger.info("Phonebook API shutting down")
    app.state.phonebook = None
    mongo.close()


app = FastAPI(
    title="Phonebook API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(info.router)
app.include_router(persons.router)

register_error_handlers(app)

# Built frontend, mounted AFTER API routes so /api/* and /info take precedence
if os.path.isdir(settings.static_dir):
    app.mount(
        "/", StaticFiles(directory=settings.static_dir, html=True), name="static",
    )
