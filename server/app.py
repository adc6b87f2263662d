"""FastAPI application factory."""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from server.dependencies import get_config, get_store, reset_dependencies
from server.routes import campus, chat, health
from utils.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup/shutdown logic."""
    config = get_config()
    logger.info(f"Campus assistant starting up (model: {config.get_model_info()})")
    config.validate()
    get_store()

    yield

    logger.info("Campus assistant shutting down")
    reset_dependencies()


def create_app() -> FastAPI:
    """Factory function to create FastAPI application."""
    config = get_config()

    app = FastAPI(
        title="Campus Assistant API",
        description="Campus chat assistant with campus data and web page context",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=config.ALLOWED_ORIGINS != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API routes first so /api/* takes precedence over static files
    app.include_router(health.router)
    app.include_router(chat.router)
    app.include_router(campus.router)

    # Serve the built web client at the root path
    client_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "client", "dist")
    if os.path.isdir(client_dir):
        app.mount("/", StaticFiles(directory=client_dir, html=True), name="client")
    else:
        logger.warning(f"Client bundle not found at {client_dir}; skipping static mount")

    return app
