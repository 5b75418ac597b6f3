"""HTTP tests for project, model, version and presence endpoints."""

import pytest

from tests.constants import EDITOR, OUTSIDER, OWNER, VIEWER
from tests.integration.http_helpers import API, as_user


@pytest.fixture
def workspace_id(client):
    workspace = client.post(
        f"{API}/workspaces", json={"name": "Team"}, headers=as_user(OWNER)
    ).json()
    members_url = f"{API}/workspaces/{workspace['id']}/members"
    client.post(members_url, json={"userId": EDITOR}, headers=as_user(OWNER))
    client.post(members_url, json={"userId": VIEWER, "role": "viewer"}, headers=as_user(OWNER))
    return workspace["id"]


@pytest.fixture
def project_id(client, workspace_id):
    response = client.post(
        f"{API}/projects",
        json={"name": "Scene1", "workspaceId": workspace_id},
        headers=as_user(OWNER),
    )
    assert response.status_code == 201
    return response.json()["id"]


class TestProjects:
    def test_created_project_has_defaults(self, client, project_id):
        project = client.get(f"{API}/projects/{project_id}", headers=as_user(VIEWER)).json()

        assert project["name"] == "Scene1"
        assert project["settings"]["renderSettings"] == {
            "quality": "medium",
            "lighting": "studio",
            "shadows": True,
        }
        assert project["lastModifiedBy"] == OWNER

        models = client.get(f"{API}/projects/{project_id}/models", headers=as_user(VIEWER)).json()
        assert sorted(m["name"] for m in models) == ["Camera", "Light"]

    def test_viewer_cannot_create(self, client, workspace_id):
        response = client.post(
            f"{API}/projects",
            json={"name": "Nope", "workspaceId": workspace_id},
            headers=as_user(VIEWER),
        )
        assert response.status_code == 403

    def test_unknown_workspace(self, client):
        response = client.post(
            f"{API}/projects",
            json={"name": "Scene", "workspaceId": "missing"},
            headers=as_user(OWNER),
        )
        assert response.status_code == 404

    def test_list_and_hidden_reads(self, client, workspace_id, project_id):
        listed = client.get(
            f"{API}/workspaces/{workspace_id}/projects", headers=as_user(EDITOR)
        ).json()
        assert [p["id"] for p in listed] == [project_id]

        assert client.get(f"{API}/projects/{project_id}", headers=as_user(OUTSIDER)).status_code == 404
        assert client.get(f"{API}/projects/{project_id}").status_code == 404
        assert client.get(
            f"{API}/projects/{project_id}/models", headers=as_user(OUTSIDER)
        ).json() == []

    def test_patch_merges_settings(self, client, project_id):
        response = client.patch(
            f"{API}/projects/{project_id}",
            json={"settings": {"gridSettings": {"visible": False, "size": 10, "divisions": 10}}},
            headers=as_user(EDITOR),
        )

        assert response.status_code == 200
        settings = response.json()["settings"]
        assert settings["gridSettings"] == {"visible": False, "size": 10, "divisions": 10}
        assert settings["renderSettings"]["quality"] == "medium"
        assert response.json()["lastModifiedBy"] == EDITOR

    def test_patch_rejects_partial_settings_group(self, client, project_id):
        url = f"{API}/projects/{project_id}"
        full = {"quality": "high", "lighting": "hdri", "shadows": False}
        client.patch(url, json={"settings": {"renderSettings": full}}, headers=as_user(OWNER))

        response = client.patch(
            url,
            json={"settings": {"renderSettings": {"quality": "low"}}},
            headers=as_user(OWNER),
        )

        assert response.status_code == 422
        stored = client.get(url, headers=as_user(OWNER)).json()
        assert stored["settings"]["renderSettings"] == full


class TestModels:
    def _create_box(self, client, project_id, **extra):
        return client.post(
            f"{API}/models",
            json={
                "projectId": project_id,
                "name": "Box",
                "type": "mesh",
                "geometry": {"type": "box", "parameters": {"width": 2}},
                **extra,
            },
            headers=as_user(EDITOR),
        )

    def test_create_model(self, client, project_id):
        response = self._create_box(client, project_id)

        assert response.status_code == 201
        model = response.json()
        assert model["transform"] == {
            "position": [0.0, 0.0, 0.0],
            "rotation": [0.0, 0.0, 0.0],
            "scale": [1.0, 1.0, 1.0],
        }
        assert model["geometry"]["parameters"]["width"] == 2.0
        assert model["visible"] is True

    def test_malformed_geometry_is_rejected(self, client, project_id):
        response = self._create_box(
            client, project_id, geometry={"type": "box", "parameters": {"width": -1}}
        )
        assert response.status_code == 422

    def test_unknown_parent(self, client, project_id):
        response = self._create_box(client, project_id, parentId="missing")

        assert response.status_code == 400
        assert "parent_id" in response.json()["validationDetails"]

    def test_partial_transform_keeps_stored_transform(self, client, project_id):
        model = self._create_box(
            client,
            project_id,
            transform={"position": [0, 0, 0], "rotation": [0, 1.5, 0], "scale": [2, 2, 2]},
        ).json()

        response = client.put(
            f"{API}/models/{model['id']}/transform",
            json={"transform": {"position": [9, 9, 9]}},
            headers=as_user(EDITOR),
        )

        assert response.status_code == 422
        assert "transform.rotation" in response.json()["validationDetails"]
        models = client.get(f"{API}/projects/{project_id}/models", headers=as_user(EDITOR)).json()
        stored = next(m for m in models if m["id"] == model["id"])
        assert stored["transform"] == {
            "position": [0.0, 0.0, 0.0],
            "rotation": [0.0, 1.5, 0.0],
            "scale": [2.0, 2.0, 2.0],
        }

    def test_transform_visibility_children_and_delete(self, client, project_id):
        parent = self._create_box(client, project_id).json()
        child = self._create_box(client, project_id, parentId=parent["id"]).json()

        moved = client.put(
            f"{API}/models/{child['id']}/transform",
            json={"transform": {"position": [1, 2, 3], "rotation": [0, 0, 0], "scale": [1, 1, 1]}},
            headers=as_user(EDITOR),
        )
        assert moved.status_code == 200
        assert moved.json()["transform"]["position"] == [1.0, 2.0, 3.0]

        partial = client.put(
            f"{API}/models/{child['id']}/transform",
            json={"transform": {"position": [1, 2]}},
            headers=as_user(EDITOR),
        )
        assert partial.status_code == 422

        hidden = client.put(
            f"{API}/models/{child['id']}/visibility",
            json={"visible": False},
            headers=as_user(EDITOR),
        )
        assert hidden.json()["visible"] is False

        children = client.get(
            f"{API}/models/{parent['id']}/children", headers=as_user(VIEWER)
        ).json()
        assert [c["id"] for c in children] == [child["id"]]

        assert client.delete(f"{API}/models/{parent['id']}", headers=as_user(VIEWER)).status_code == 403
        assert client.delete(f"{API}/models/{parent['id']}", headers=as_user(EDITOR)).status_code == 204

        models = client.get(f"{API}/projects/{project_id}/models", headers=as_user(OWNER)).json()
        orphan = next(m for m in models if m["id"] == child["id"])
        assert orphan["parentId"] == parent["id"]


class TestVersionsAndPresence:
    def test_versions(self, client, project_id):
        created = client.post(
            f"{API}/projects/{project_id}/versions",
            json={"name": "Blockout"},
            headers=as_user(EDITOR),
        )
        assert created.status_code == 201
        assert created.json()["versionNumber"] == 1
        assert "data" not in created.json()

        listed = client.get(f"{API}/projects/{project_id}/versions", headers=as_user(VIEWER)).json()
        assert [v["versionNumber"] for v in listed] == [1]

        version = client.get(
            f"{API}/versions/{created.json()['id']}", headers=as_user(VIEWER)
        ).json()
        assert '"models"' in version["data"]

        assert client.get(
            f"{API}/versions/{created.json()['id']}", headers=as_user(OUTSIDER)
        ).status_code == 404

    def test_presence(self, client, project_id):
        url = f"{API}/projects/{project_id}/presence"

        joined = client.put(
            url, json={"cursor": {"position": [0, 1, 0]}}, headers=as_user(VIEWER)
        )
        assert joined.status_code == 200
        assert joined.json()["isActive"] is True

        active = client.get(url, headers=as_user(OWNER)).json()
        assert [s["userId"] for s in active] == [VIEWER]

        assert client.put(url, json={}, headers=as_user(OUTSIDER)).status_code == 403
        assert client.delete(url, headers=as_user(VIEWER)).status_code == 204
        assert client.get(url, headers=as_user(OWNER)).json() == []


class TestMaterialsAndProfile:
    def test_material_library(self, client, workspace_id):
        url = f"{API}/workspaces/{workspace_id}/materials"

        created = client.post(
            url,
            json={"name": "Oak", "material": {"type": "standard", "properties": {"roughness": 0.8}}},
            headers=as_user(EDITOR),
        )
        assert created.status_code == 201
        assert created.json()["material"]["properties"]["roughness"] == 0.8

        assert client.get(url, params={"search": "oak"}, headers=as_user(VIEWER)).json()[0]["name"] == "Oak"
        assert client.get(url, headers=as_user(OUTSIDER)).json() == []

        material_url = f"{API}/materials/{created.json()['id']}"
        renamed = client.patch(material_url, json={"name": "Oak veneer"}, headers=as_user(EDITOR))
        assert renamed.json()["name"] == "Oak veneer"
        assert client.delete(material_url, headers=as_user(VIEWER)).status_code == 403
        assert client.delete(material_url, headers=as_user(EDITOR)).status_code == 204
        assert client.get(material_url, headers=as_user(EDITOR)).status_code == 404

    def test_profile(self, client):
        assert client.get(f"{API}/users/me").status_code == 401
        assert client.get(f"{API}/users/me", headers=as_user(OWNER)).json()["id"] == OWNER

        updated = client.put(
            f"{API}/users/me",
            json={"name": "Olivia", "email": "olivia@example.com"},
            headers=as_user(OWNER),
        ).json()
        assert updated["name"] == "Olivia"
        assert updated["createdAt"] is not None
