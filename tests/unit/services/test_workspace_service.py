"""Tests for WorkspaceService."""

import pytest

from scenehub.server.repository.entities import WorkspaceRole
from scenehub.server.repository.workspace_repository import WorkspaceMemberRepository
from scenehub.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    PermissionDeniedError,
    UnauthenticatedError,
    ValidationError,
)

from tests.constants import EDITOR, OUTSIDER, OWNER, VIEWER


class TestCreateWorkspace:
    def test_creator_becomes_owner(self, db_session, workspace_service):
        workspace = workspace_service.create(db_session, OWNER, "Team", description="Studio")

        membership = WorkspaceMemberRepository().find_membership(db_session, workspace.id, OWNER)
        assert membership is not None
        assert membership.role == WorkspaceRole.OWNER
        assert workspace.owner_id == OWNER
        assert workspace.description == "Studio"
        assert workspace.is_public is False

    def test_requires_authentication(self, db_session, workspace_service):
        with pytest.raises(UnauthenticatedError):
            workspace_service.create(db_session, None, "Team")

    def test_rejects_blank_name(self, db_session, workspace_service):
        with pytest.raises(ValidationError):
            workspace_service.create(db_session, OWNER, "   ")

    def test_name_is_trimmed(self, db_session, workspace_service):
        workspace = workspace_service.create(db_session, OWNER, "  Team  ")
        assert workspace.name == "Team"


class TestReadWorkspaces:
    def test_list_for_user_pairs_role(self, db_session, workspace_service, team):
        other = workspace_service.create(db_session, VIEWER, "Personal")

        workspaces = workspace_service.list_for_user(db_session, VIEWER)

        roles = {w.id: w.role for w in workspaces}
        assert roles == {team.id: WorkspaceRole.VIEWER, other.id: WorkspaceRole.OWNER}

    def test_list_for_anonymous_is_empty(self, db_session, workspace_service, team):
        assert workspace_service.list_for_user(db_session, None) == []

    def test_get_by_id_returns_member_role(self, db_session, workspace_service, team):
        workspace = workspace_service.get_by_id(db_session, EDITOR, team.id)
        assert workspace.role == WorkspaceRole.EDITOR

    def test_private_workspace_hidden_from_non_members(self, db_session, workspace_service, team):
        assert workspace_service.get_by_id(db_session, OUTSIDER, team.id) is None

    def test_public_workspace_visible_as_viewer(self, db_session, workspace_service):
        workspace = workspace_service.create(db_session, OWNER, "Open", is_public=True)

        result = workspace_service.get_by_id(db_session, OUTSIDER, workspace.id)

        assert result is not None
        assert result.role == WorkspaceRole.VIEWER

    def test_get_by_id_missing_or_anonymous(self, db_session, workspace_service, team):
        assert workspace_service.get_by_id(db_session, OWNER, "missing") is None
        assert workspace_service.get_by_id(db_session, None, team.id) is None


class TestMembers:
    def test_list_members_joins_profiles_and_drops_missing(
        self, db_session, workspace_service, user_repository, team
    ):
        user_repository.upsert(db_session, OWNER, name="Olivia")
        user_repository.upsert(db_session, EDITOR, name="Eli", email="eli@example.com")

        members = workspace_service.list_members(db_session, VIEWER, team.id)

        assert {m.user_id for m in members} == {OWNER, EDITOR}
        editor = next(m for m in members if m.user_id == EDITOR)
        assert editor.user.email == "eli@example.com"
        assert editor.invited_by == OWNER

    def test_list_members_has_no_public_fallback(self, db_session, workspace_service, user_repository):
        workspace = workspace_service.create(db_session, OWNER, "Open", is_public=True)
        user_repository.upsert(db_session, OWNER, name="Olivia")

        assert workspace_service.list_members(db_session, OUTSIDER, workspace.id) == []

    def test_add_member_rejects_duplicates(self, db_session, workspace_service, team):
        with pytest.raises(ConflictError):
            workspace_service.add_member(db_session, OWNER, team.id, EDITOR, WorkspaceRole.VIEWER)

    def test_add_member_cannot_grant_owner(self, db_session, workspace_service, team):
        with pytest.raises(ValidationError):
            workspace_service.add_member(db_session, OWNER, team.id, OUTSIDER, WorkspaceRole.OWNER)

    def test_editor_cannot_manage_members(self, db_session, workspace_service, team):
        with pytest.raises(PermissionDeniedError):
            workspace_service.add_member(db_session, EDITOR, team.id, OUTSIDER, WorkspaceRole.VIEWER)

    def test_admin_can_manage_members(self, db_session, workspace_service, team):
        workspace_service.update_member_role(
            db_session, OWNER, team.id, EDITOR, WorkspaceRole.ADMIN
        )

        member = workspace_service.add_member(
            db_session, EDITOR, team.id, OUTSIDER, WorkspaceRole.VIEWER
        )

        assert member.role == WorkspaceRole.VIEWER
        assert member.invited_by == EDITOR

    def test_owner_membership_is_protected(self, db_session, workspace_service, team):
        with pytest.raises(ValidationError):
            workspace_service.update_member_role(
                db_session, OWNER, team.id, OWNER, WorkspaceRole.EDITOR
            )
        with pytest.raises(ValidationError):
            workspace_service.remove_member(db_session, OWNER, team.id, OWNER)

    def test_remove_member(self, db_session, workspace_service, authorization, team):
        workspace_service.remove_member(db_session, OWNER, team.id, VIEWER)

        assert authorization.resolve_role(db_session, team.id, VIEWER) is None
        with pytest.raises(EntityNotFoundError):
            workspace_service.remove_member(db_session, OWNER, team.id, VIEWER)


class TestUpdateWorkspace:
    def test_partial_update(self, db_session, workspace_service, team):
        updated = workspace_service.update(
            db_session, OWNER, team.id, {"is_public": True, "owner_id": OUTSIDER}
        )

        assert updated.is_public is True
        assert updated.name == "Team"
        assert updated.owner_id == OWNER
        assert updated.updated_at is not None

    def test_settings_update(self, db_session, workspace_service, team):
        updated = workspace_service.update(
            db_session,
            OWNER,
            team.id,
            {"settings": {"default_project_settings": {"render_quality": "high"}}},
        )

        assert updated.settings.default_project_settings.render_quality == "high"
        assert updated.settings.default_project_settings.auto_save is True

    def test_editor_cannot_update(self, db_session, workspace_service, team):
        with pytest.raises(PermissionDeniedError):
            workspace_service.update(db_session, EDITOR, team.id, {"name": "Renamed"})

    def test_checks_authentication_before_existence(self, db_session, workspace_service):
        with pytest.raises(UnauthenticatedError):
            workspace_service.update(db_session, None, "missing", {"name": "x"})
        with pytest.raises(EntityNotFoundError):
            workspace_service.update(db_session, OWNER, "missing", {"name": "x"})
