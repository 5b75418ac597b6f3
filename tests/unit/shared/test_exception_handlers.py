"""
Tests for the exception-to-HTTP mapping.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from scenehub.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    InternalServiceError,
    PermissionDeniedError,
    UnauthenticatedError,
    ValidationError,
    register_exception_handlers,
)


class Payload(BaseModel):
    count: int


@pytest.fixture
def client():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/unauthenticated")
    async def unauthenticated():
        raise UnauthenticatedError()

    @app.get("/denied")
    async def denied():
        raise PermissionDeniedError("Insufficient permissions to create projects", "ws-1", "editor")

    @app.get("/missing")
    async def missing():
        raise EntityNotFoundError("project", "p-1")

    @app.get("/invalid")
    async def invalid():
        raise ValidationError("Invalid geometry", {"parameters.width": ["must be positive"]})

    @app.get("/conflict")
    async def conflict():
        raise ConflictError("User u1 is already a member of this workspace")

    @app.get("/internal")
    async def internal():
        raise InternalServiceError("database exploded")

    @app.get("/crash")
    async def crash():
        raise RuntimeError("boom")

    @app.post("/payload")
    async def payload(body: Payload):
        return body

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.parametrize(
    "path,status_code,message",
    [
        ("/unauthenticated", 401, "Authentication required"),
        ("/denied", 403, "Insufficient permissions to create projects"),
        ("/missing", 404, "Project not found"),
        ("/conflict", 409, "User u1 is already a member of this workspace"),
    ],
)
def test_domain_errors_map_to_status(client, path, status_code, message):
    response = client.get(path)

    assert response.status_code == status_code
    assert response.json() == {"message": message}


def test_validation_error_carries_details(client):
    response = client.get("/invalid")

    assert response.status_code == 400
    assert response.json() == {
        "message": "Invalid geometry",
        "validationDetails": {"parameters.width": ["must be positive"]},
    }


def test_request_validation_error(client):
    response = client.post("/payload", json={"count": "many"})

    assert response.status_code == 422
    body = response.json()
    assert body["message"] == "Invalid request"
    assert "count" in body["validationDetails"]


def test_internal_details_are_not_leaked(client):
    for path in ("/internal", "/crash"):
        response = client.get(path)

        assert response.status_code == 500
        assert response.json() == {"message": "An unexpected error occurred."}
