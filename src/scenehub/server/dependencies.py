"""
FastAPI dependency injectors for the database session, the calling user's
identity, configuration and the business services.
"""

import logging
from collections.abc import Generator
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy import create_engine, event
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..config import SceneHubConfig
from .repository import (
    CollaborationRepository,
    MaterialRepository,
    ProjectRepository,
    ProjectVersionRepository,
    SceneObjectRepository,
    UserRepository,
    WorkspaceMemberRepository,
    WorkspaceRepository,
)
from .services.authorization_service import AuthorizationService
from .services.collaboration_service import CollaborationService
from .services.material_service import MaterialService
from .services.model_service import ModelService
from .services.project_service import ProjectService
from .services.user_service import UserService
from .services.version_service import VersionService
from .services.workspace_service import WorkspaceService

log = logging.getLogger(__name__)

SessionLocal: sessionmaker = None


def _engine_options(dialect_name: str) -> dict:
    if dialect_name == "sqlite":
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_recycle": 1800}


def _enable_sqlite_foreign_keys(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def init_database(database_url: str, echo: bool = False) -> None:
    """
    Create the engine and session factory used by get_db.

    SQLite runs on a single shared connection with foreign keys enforced;
    server databases get a pre-pinged, recycled connection pool.
    """
    global SessionLocal
    if SessionLocal is not None:
        log.warning("Database already initialized.")
        return

    url = make_url(database_url)
    dialect_name = url.get_dialect().name
    engine = create_engine(url, echo=echo, **_engine_options(dialect_name))
    if dialect_name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    log.info("Database initialized: %s", url.render_as_string(hide_password=True))


def get_db() -> Generator[Session, None, None]:
    """
    One session and one transaction per request. Services only flush; the
    commit happens here after the handler returns, and any exception rolls
    every write of the request back.
    """
    if SessionLocal is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database is not configured.",
        )
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        try:
            db.rollback()
        except Exception as rollback_error:
            log.warning("Failed to rollback after error: %s", rollback_error)
        raise
    finally:
        db.close()


def get_config(request: Request) -> SceneHubConfig:
    return request.app.state.config


def get_user_id(
    request: Request,
    config: SceneHubConfig = Depends(get_config),
) -> Optional[str]:
    """
    Returns the caller's identity, or None for anonymous requests.

    IdentityMiddleware populates request.state.user. When authorization is
    disabled, requests without an identity act as the development user.
    """
    user = getattr(request.state, "user", None)
    if user and user.get("id"):
        return user["id"]

    if not config.auth.use_authorization:
        log.debug(
            "Authorization disabled and no user in request state, using fallback user: %s",
            config.auth.dev_user_id,
        )
        return config.auth.dev_user_id

    return None


def get_authorization_service() -> AuthorizationService:
    return AuthorizationService(WorkspaceMemberRepository())


def get_workspace_service(
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> WorkspaceService:
    return WorkspaceService(
        WorkspaceRepository(), WorkspaceMemberRepository(), UserRepository(), authorization
    )


def get_project_service(
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> ProjectService:
    return ProjectService(
        ProjectRepository(), SceneObjectRepository(), WorkspaceRepository(), authorization
    )


def get_model_service(
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> ModelService:
    return ModelService(SceneObjectRepository(), ProjectRepository(), authorization)


def get_material_service(
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> MaterialService:
    return MaterialService(MaterialRepository(), WorkspaceRepository(), authorization)


def get_version_service(
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> VersionService:
    return VersionService(
        ProjectVersionRepository(), ProjectRepository(), SceneObjectRepository(), authorization
    )


def get_collaboration_service(
    config: SceneHubConfig = Depends(get_config),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> CollaborationService:
    return CollaborationService(
        CollaborationRepository(),
        ProjectRepository(),
        authorization,
        presence_timeout_seconds=config.collaboration.presence_timeout_seconds,
    )


def get_user_service() -> UserService:
    return UserService(UserRepository())
