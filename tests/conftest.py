"""
Shared fixtures: an in-memory SQLite database and the service graph wired
the same way the FastAPI dependencies wire it.
"""

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from scenehub.server.repository import (
    CollaborationRepository,
    MaterialRepository,
    ProjectRepository,
    ProjectVersionRepository,
    SceneObjectRepository,
    UserRepository,
    WorkspaceMemberRepository,
    WorkspaceRepository,
)
from scenehub.server.repository.models import Base
from scenehub.server.services.authorization_service import AuthorizationService
from scenehub.server.services.collaboration_service import CollaborationService
from scenehub.server.services.material_service import MaterialService
from scenehub.server.services.model_service import ModelService
from scenehub.server.services.project_service import ProjectService
from scenehub.server.services.user_service import UserService
from scenehub.server.services.version_service import VersionService
from scenehub.server.services.workspace_service import WorkspaceService

from tests.constants import EDITOR, OWNER, VIEWER


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    """Create a session against the in-memory database for testing."""
    session = session_factory()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def authorization():
    return AuthorizationService(WorkspaceMemberRepository())


@pytest.fixture
def user_repository():
    return UserRepository()


@pytest.fixture
def workspace_service(authorization, user_repository):
    return WorkspaceService(
        WorkspaceRepository(), WorkspaceMemberRepository(), user_repository, authorization
    )


@pytest.fixture
def project_service(authorization):
    return ProjectService(
        ProjectRepository(), SceneObjectRepository(), WorkspaceRepository(), authorization
    )


@pytest.fixture
def model_service(authorization):
    return ModelService(SceneObjectRepository(), ProjectRepository(), authorization)


@pytest.fixture
def material_service(authorization):
    return MaterialService(MaterialRepository(), WorkspaceRepository(), authorization)


@pytest.fixture
def version_service(authorization):
    return VersionService(
        ProjectVersionRepository(), ProjectRepository(), SceneObjectRepository(), authorization
    )


@pytest.fixture
def collaboration_service(authorization):
    return CollaborationService(
        CollaborationRepository(), ProjectRepository(), authorization, presence_timeout_seconds=30
    )


@pytest.fixture
def user_service(user_repository):
    return UserService(user_repository)


@pytest.fixture
def team(db_session, workspace_service):
    """
    A private workspace owned by OWNER with EDITOR and VIEWER members.
    OUTSIDER has no membership.
    """
    workspace = workspace_service.create(db_session, OWNER, "Team")
    workspace_service.add_member(db_session, OWNER, workspace.id, EDITOR, "editor")
    workspace_service.add_member(db_session, OWNER, workspace.id, VIEWER, "viewer")
    return workspace


@pytest.fixture
def scene(db_session, project_service, team):
    """Id of a private project "Scene1" in the team workspace."""
    return project_service.create(db_session, OWNER, "Scene1", team.id)
