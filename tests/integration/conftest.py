"""
Fixtures for HTTP-level tests: the real application with its database
dependency pointed at the in-memory test database.
"""

import pytest
from fastapi.testclient import TestClient

from scenehub.config import AuthConfig, DatabaseConfig, SceneHubConfig
from scenehub.server.app import create_app
from scenehub.server.dependencies import get_db


def _override_db(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    return override_get_db


@pytest.fixture
def api_config():
    return SceneHubConfig(database=DatabaseConfig(url=None))


@pytest.fixture
def app(api_config, session_factory):
    app = create_app(api_config, setup_database=False)
    app.dependency_overrides[get_db] = _override_db(session_factory)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def dev_client(session_factory):
    """Client for an application running with authorization disabled."""
    config = SceneHubConfig(
        database=DatabaseConfig(url=None),
        auth=AuthConfig(use_authorization=False, dev_user_id="dev-user"),
    )
    app = create_app(config, setup_database=False)
    app.dependency_overrides[get_db] = _override_db(session_factory)
    with TestClient(app) as test_client:
        yield test_client
