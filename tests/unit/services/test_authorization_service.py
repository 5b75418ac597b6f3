"""Tests for the authorization guard."""

import pytest

from scenehub.server.repository.entities import WorkspaceRole
from scenehub.server.services.authorization_service import (
    can_administer,
    can_edit,
    require_user,
)
from scenehub.shared.exceptions import PermissionDeniedError, UnauthenticatedError

from tests.constants import EDITOR, OUTSIDER, OWNER, VIEWER


class TestRolePredicates:
    @pytest.mark.parametrize(
        "role,expected",
        [
            (WorkspaceRole.OWNER, True),
            (WorkspaceRole.ADMIN, True),
            (WorkspaceRole.EDITOR, True),
            (WorkspaceRole.VIEWER, False),
            (None, False),
        ],
    )
    def test_can_edit(self, role, expected):
        assert can_edit(role) is expected

    @pytest.mark.parametrize(
        "role,expected",
        [
            (WorkspaceRole.OWNER, True),
            (WorkspaceRole.ADMIN, True),
            (WorkspaceRole.EDITOR, False),
            (WorkspaceRole.VIEWER, False),
            (None, False),
        ],
    )
    def test_can_administer(self, role, expected):
        assert can_administer(role) is expected

    def test_require_user_rejects_missing_identity(self):
        with pytest.raises(UnauthenticatedError):
            require_user(None)
        with pytest.raises(UnauthenticatedError):
            require_user("")

    def test_require_user_returns_identity(self):
        assert require_user("u1") == "u1"


class TestAuthorizationService:
    def test_resolve_role_for_members(self, db_session, authorization, team):
        assert authorization.resolve_role(db_session, team.id, OWNER) == WorkspaceRole.OWNER
        assert authorization.resolve_role(db_session, team.id, EDITOR) == WorkspaceRole.EDITOR
        assert authorization.resolve_role(db_session, team.id, VIEWER) == WorkspaceRole.VIEWER

    def test_resolve_role_absent_for_non_members(self, db_session, authorization, team):
        assert authorization.resolve_role(db_session, team.id, OUTSIDER) is None
        assert authorization.resolve_role(db_session, team.id, None) is None

    def test_can_read_member_or_public(self, db_session, authorization, team):
        assert authorization.can_read(db_session, team.id, VIEWER, False) is True
        assert authorization.can_read(db_session, team.id, OUTSIDER, False) is False
        assert authorization.can_read(db_session, team.id, OUTSIDER, True) is True

    def test_anonymous_cannot_read_public_resources(self, db_session, authorization, team):
        assert authorization.can_read(db_session, team.id, None, True) is False

    def test_authorize_returns_role_when_allowed(self, db_session, authorization, team):
        role = authorization.authorize(db_session, team.id, EDITOR, can_edit)
        assert role == WorkspaceRole.EDITOR

    def test_authorize_denies_viewer_writes(self, db_session, authorization, team):
        with pytest.raises(PermissionDeniedError) as exc_info:
            authorization.authorize(db_session, team.id, VIEWER, can_edit, "create projects")

        assert exc_info.value.workspace_id == team.id
        assert exc_info.value.required == "editor"
        assert "create projects" in exc_info.value.message

    def test_authorize_denies_editor_administration(self, db_session, authorization, team):
        with pytest.raises(PermissionDeniedError) as exc_info:
            authorization.authorize(db_session, team.id, EDITOR, can_administer)

        assert exc_info.value.required == "owner or admin"

    def test_authorize_denies_non_members(self, db_session, authorization, team):
        with pytest.raises(PermissionDeniedError):
            authorization.authorize(db_session, team.id, OUTSIDER, can_edit)
