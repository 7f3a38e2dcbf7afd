"""FastAPI application bootstrap."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.todo import UserStore
from src.todo_pro.config import Config
from src.todo_pro.logger import setup_logger

from .errors import register_error_handlers
from .routes import (
    register_health_routes,
    register_todo_routes,
    register_user_routes,
)


def create_app(config: Optional[Config] = None, store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Each application owns its own :class:`UserStore`; pass ``store`` to share
    one between applications or to seed it.
    """
    if config is None:
        config = Config.load()

    app = FastAPI(title="Todo Pro API", version="1.0.0")
    app.state.config = config
    app.state.user_store = store if store is not None else UserStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    register_health_routes(app)
    register_user_routes(app)
    register_todo_routes(app)

    return app


def build_app() -> FastAPI:
    """Load the configuration, set up logging and create the served app.

    Used by uvicorn as an application factory.
    """
    config = Config.load()
    setup_logger(log_level=config.log_level, log_file=config.log_file)
    return create_app(config)
