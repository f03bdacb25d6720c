"""Application factory for the debug status server.

This module exposes `create_app(config: Config) -> FastAPI`, which captures
the startup timestamp, registers it in the service container and mounts
the status router. Nothing is created at import time so tests can
construct isolated apps:

    from debug_lib.main import create_app, Config
    app = create_app(Config())
"""
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from debug_lib.server.health import capture_startup_time
from debug_lib.services import ServiceContainer


@dataclass
class Config:
    host: str = "0.0.0.0"
    # If None, resolve from the PORT environment variable
    port: Optional[int] = None
    # If None, captured when the app is created
    started_at: Optional[datetime] = None
    log_config_path: Optional[Path] = None


def create_app(config: Config) -> FastAPI:
    """Create and return a configured FastAPI application."""
    started_at = config.started_at or capture_startup_time()

    container = ServiceContainer()
    container.register_singleton("started_at", started_at)

    app = FastAPI(title="Debug Status Server", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.container = container

    from debug_lib.server.api import router as server_router
    app.include_router(server_router)

    return app
