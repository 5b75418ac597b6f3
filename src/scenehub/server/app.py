"""
FastAPI application factory for the SceneHub server.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import SceneHubConfig
from ..shared.exceptions import register_exception_handlers
from . import dependencies
from .middleware import IdentityMiddleware
from .migrations import run_migrations
from .routers import collaboration, materials, models, projects, users, versions, workspaces

log = logging.getLogger(__name__)


def _setup_database(config: SceneHubConfig) -> None:
    database_url = config.database.url
    if not database_url:
        log.warning("No database URL configured; endpoints that need storage will return 503")
        return

    if config.database.auto_migrate:
        run_migrations(database_url)
    else:
        log.info("Automatic migrations disabled; run 'scenehub init-db' to create the schema")

    dependencies.init_database(database_url, echo=config.database.echo)


def _setup_middleware(app: FastAPI, config: SceneHubConfig) -> None:
    allowed_origins = config.server.cors_allowed_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    log.info("CORSMiddleware added with origins: %s", allowed_origins)

    app.add_middleware(IdentityMiddleware, auth_config=config.auth)
    if config.auth.use_authorization:
        log.info("IdentityMiddleware added (identity required for writes)")
    else:
        log.info(
            "IdentityMiddleware added (development mode - fallback user %s)",
            config.auth.dev_user_id,
        )


def _setup_routers(app: FastAPI, config: SceneHubConfig) -> None:
    api_prefix = config.server.api_prefix

    app.include_router(workspaces.router, prefix=api_prefix, tags=["Workspaces"])
    app.include_router(projects.router, prefix=api_prefix, tags=["Projects"])
    app.include_router(models.router, prefix=api_prefix, tags=["Models"])
    app.include_router(materials.router, prefix=api_prefix, tags=["Materials"])
    app.include_router(versions.router, prefix=api_prefix, tags=["Versions"])
    app.include_router(collaboration.router, prefix=api_prefix, tags=["Collaboration"])
    app.include_router(users.router, prefix=api_prefix, tags=["Users"])
    log.info("Routers mounted under %s", api_prefix)

    register_exception_handlers(app)


def create_app(config: Optional[SceneHubConfig] = None, setup_database: bool = True) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Server configuration; defaults are used when omitted
        setup_database: Run migrations and initialize the session factory.
            Tests pass False and override get_db instead.
    """
    config = config or SceneHubConfig()

    app = FastAPI(
        title="SceneHub",
        version=__version__,
        description="Collaborative 3D scene editing backend.",
    )
    app.state.config = config

    if setup_database:
        _setup_database(config)
    _setup_middleware(app, config)
    _setup_routers(app, config)

    @app.get("/health", tags=["Health"])
    async def health():
        """Basic health check endpoint."""
        log.debug("Health check endpoint '/health' called")
        return {"status": "SceneHub is running", "version": __version__}

    return app
