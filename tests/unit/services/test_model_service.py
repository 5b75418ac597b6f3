"""Tests for ModelService."""

from unittest.mock import patch

import pytest

from scenehub.server.repository.entities import Transform
from scenehub.shared.exceptions import (
    EntityNotFoundError,
    PermissionDeniedError,
    UnauthenticatedError,
    ValidationError,
)

from tests.constants import EDITOR, OUTSIDER, OWNER, VIEWER

NOW = "scenehub.server.services.model_service.now_epoch_ms"


class TestCreateModel:
    def test_defaults(self, db_session, model_service, scene):
        model = model_service.create(db_session, EDITOR, scene, "Box", "mesh")

        assert model.transform == Transform()
        assert model.transform.scale == [1.0, 1.0, 1.0]
        assert model.visible is True
        assert model.locked is False
        assert model.geometry is None
        assert model.created_by == EDITOR
        assert model.last_modified_by == EDITOR

    def test_touches_project_with_same_timestamp(
        self, db_session, model_service, project_service, scene
    ):
        with patch(NOW, return_value=5_000_000_000_000):
            model = model_service.create(db_session, EDITOR, scene, "Box", "mesh")

        project = project_service.get_by_id(db_session, OWNER, scene)
        assert model.created_at == 5_000_000_000_000
        assert project.last_modified == 5_000_000_000_000
        assert project.last_modified_by == EDITOR

    def test_geometry_and_material_are_validated(self, db_session, model_service, scene):
        model = model_service.create(
            db_session,
            EDITOR,
            scene,
            "Box",
            "mesh",
            geometry={"type": "box", "parameters": {"width": 2}},
            material={"type": "standard", "properties": {"color": [1, 0, 0]}},
        )

        assert model.geometry.type == "box"
        assert model.geometry.parameters.width == 2.0
        assert model.geometry.parameters.depth == 1.0
        assert model.material.properties.color == [1.0, 0.0, 0.0, 1.0]

    def test_invalid_geometry_rejected(self, db_session, model_service, scene):
        with pytest.raises(ValidationError) as exc_info:
            model_service.create(
                db_session,
                EDITOR,
                scene,
                "Cone",
                "mesh",
                geometry={"type": "cylinder", "parameters": {"radius_top": 0, "radius_bottom": 0}},
            )
        assert exc_info.value.entity_type == "geometry"
        assert exc_info.value.validation_details

    def test_unknown_parent_rejected(self, db_session, model_service, scene):
        with pytest.raises(ValidationError):
            model_service.create(db_session, EDITOR, scene, "Child", "mesh", parent_id="missing")

    def test_parent_from_other_project_rejected(
        self, db_session, model_service, project_service, team, scene
    ):
        other = project_service.create(db_session, OWNER, "Other", team.id)
        foreign = model_service.create(db_session, OWNER, other, "Foreign", "empty")

        with pytest.raises(ValidationError):
            model_service.create(db_session, EDITOR, scene, "Child", "mesh", parent_id=foreign.id)

    def test_viewer_and_outsider_denied(self, db_session, model_service, scene):
        with pytest.raises(PermissionDeniedError):
            model_service.create(db_session, VIEWER, scene, "Box", "mesh")
        with pytest.raises(PermissionDeniedError):
            model_service.create(db_session, OUTSIDER, scene, "Box", "mesh")

    def test_error_precedence(self, db_session, model_service):
        with pytest.raises(UnauthenticatedError):
            model_service.create(db_session, None, "missing", "Box", "mesh")
        with pytest.raises(EntityNotFoundError):
            model_service.create(db_session, EDITOR, "missing", "Box", "mesh")

    def test_blank_name_rejected(self, db_session, model_service, scene):
        with pytest.raises(ValidationError):
            model_service.create(db_session, EDITOR, scene, " ", "mesh")


class TestUpdateTransform:
    def test_round_trip(self, db_session, model_service, project_service, scene):
        model = model_service.create(db_session, EDITOR, scene, "Box", "mesh")
        transform = Transform(position=[1, 2, 3], rotation=[0, 1.5, 0], scale=[2, 2, 2])

        model_service.update_transform(db_session, EDITOR, model.id, transform)

        stored = next(
            m for m in project_service.get_models(db_session, VIEWER, scene) if m.id == model.id
        )
        assert stored.transform.position == [1.0, 2.0, 3.0]
        assert stored.transform.rotation == [0.0, 1.5, 0.0]
        assert stored.transform.scale == [2.0, 2.0, 2.0]

    def test_repeated_update_only_changes_timestamps(
        self, db_session, model_service, project_service, scene
    ):
        model = model_service.create(db_session, EDITOR, scene, "Box", "mesh")
        transform = Transform(position=[1, 1, 1])

        with patch(NOW, side_effect=[6_000_000_000_000, 7_000_000_000_000]):
            first = model_service.update_transform(db_session, EDITOR, model.id, transform)
            second = model_service.update_transform(db_session, EDITOR, model.id, transform)

        assert first.transform == second.transform
        assert first.last_modified == 6_000_000_000_000
        assert second.last_modified == 7_000_000_000_000
        project = project_service.get_by_id(db_session, OWNER, scene)
        assert project.last_modified == 7_000_000_000_000

    def test_viewer_denied(self, db_session, model_service, scene):
        model = model_service.create(db_session, EDITOR, scene, "Box", "mesh")
        with pytest.raises(PermissionDeniedError):
            model_service.update_transform(db_session, VIEWER, model.id, Transform())

    def test_missing_model(self, db_session, model_service):
        with pytest.raises(EntityNotFoundError):
            model_service.update_transform(db_session, EDITOR, "missing", Transform())


class TestVisibilityAndHierarchy:
    def test_set_visibility(self, db_session, model_service, scene):
        model = model_service.create(db_session, EDITOR, scene, "Box", "mesh")

        hidden = model_service.set_visibility(db_session, EDITOR, model.id, False)
        shown = model_service.set_visibility(db_session, EDITOR, model.id, True)

        assert hidden.visible is False
        assert shown.visible is True
        assert shown.locked is False

    def test_get_children(self, db_session, model_service, scene):
        group = model_service.create(db_session, EDITOR, scene, "Group", "empty")
        child = model_service.create(db_session, EDITOR, scene, "Child", "mesh", parent_id=group.id)
        model_service.create(db_session, EDITOR, scene, "Loose", "mesh")

        children = model_service.get_children(db_session, VIEWER, group.id)

        assert [c.id for c in children] == [child.id]
        assert model_service.get_children(db_session, OUTSIDER, group.id) == []
        assert model_service.get_children(db_session, VIEWER, "missing") == []

    def test_remove_leaves_children_dangling(
        self, db_session, model_service, project_service, scene
    ):
        parent = model_service.create(db_session, EDITOR, scene, "Parent", "empty")
        child = model_service.create(
            db_session, EDITOR, scene, "Child", "mesh", parent_id=parent.id
        )

        model_service.remove(db_session, EDITOR, parent.id)

        models = {m.id: m for m in project_service.get_models(db_session, OWNER, scene)}
        assert parent.id not in models
        assert models[child.id].parent_id == parent.id
        assert [c.id for c in model_service.get_children(db_session, OWNER, parent.id)] == []

    def test_remove_requires_editor(self, db_session, model_service, scene):
        model = model_service.create(db_session, EDITOR, scene, "Box", "mesh")
        with pytest.raises(PermissionDeniedError):
            model_service.remove(db_session, VIEWER, model.id)
        with pytest.raises(EntityNotFoundError):
            model_service.remove(db_session, EDITOR, "missing")


def test_team_scene_walkthrough(db_session, workspace_service, project_service, model_service):
    workspace = workspace_service.create(db_session, OWNER, "Team")
    project_id = project_service.create(db_session, OWNER, "Scene1", workspace.id)
    model_service.create(
        db_session, OWNER, project_id, "Box", "mesh", geometry={"type": "box"}
    )

    models = project_service.get_models(db_session, OWNER, project_id)

    assert sorted(m.name for m in models) == ["Box", "Camera", "Light"]
