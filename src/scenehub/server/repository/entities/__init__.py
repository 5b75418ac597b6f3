"""
Domain entities for the repository layer.
"""

from .collaboration import CollaborationSession, Cursor
from .geometry import Geometry, parse_geometry
from .material import Material, parse_material
from .material_library import MaterialLibraryEntry
from .project import GridSettings, Project, ProjectSettings, RenderSettings
from .project_version import ProjectVersion
from .scene_object import SceneObject
from .transform import Transform, Vector3
from .user import User
from .workspace import (
    Workspace,
    WorkspaceMember,
    WorkspaceMemberWithUser,
    WorkspaceRole,
    WorkspaceSettings,
    WorkspaceWithRole,
)

__all__ = [
    "CollaborationSession",
    "Cursor",
    "Geometry",
    "GridSettings",
    "Material",
    "MaterialLibraryEntry",
    "Project",
    "ProjectSettings",
    "ProjectVersion",
    "RenderSettings",
    "SceneObject",
    "Transform",
    "User",
    "Vector3",
    "Workspace",
    "WorkspaceMember",
    "WorkspaceMemberWithUser",
    "WorkspaceRole",
    "WorkspaceSettings",
    "WorkspaceWithRole",
    "parse_geometry",
    "parse_material",
]
