"""
Project API router.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session as DBSession

from ...shared.exceptions import EntityNotFoundError
from ..dependencies import get_db, get_project_service, get_user_id
from ..services.project_service import ProjectService
from .dto.requests import CreateProjectRequest, UpdateProjectRequest
from .dto.responses import ModelResponse, ProjectCreatedResponse, ProjectResponse

router = APIRouter()


@router.post(
    "/projects", response_model=ProjectCreatedResponse, status_code=status.HTTP_201_CREATED
)
async def create_project(
    request: CreateProjectRequest,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    project_service: ProjectService = Depends(get_project_service),
):
    """Create a project seeded with a default camera and light."""
    project_id = project_service.create(
        db,
        user_id,
        name=request.name,
        workspace_id=request.workspace_id,
        description=request.description,
        is_public=request.is_public,
    )
    return ProjectCreatedResponse(id=project_id)


@router.get("/workspaces/{workspace_id}/projects", response_model=list[ProjectResponse])
async def list_workspace_projects(
    workspace_id: str,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    project_service: ProjectService = Depends(get_project_service),
):
    """Projects of a workspace, newest first. Members only."""
    projects = project_service.get_by_workspace(db, user_id, workspace_id)
    return [ProjectResponse.model_validate(p) for p in projects]


@router.get("/projects/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    project_service: ProjectService = Depends(get_project_service),
):
    project = project_service.get_by_id(db, user_id, project_id)
    if project is None:
        raise EntityNotFoundError("project", project_id)
    return ProjectResponse.model_validate(project)


@router.get("/projects/{project_id}/models", response_model=list[ModelResponse])
async def get_project_models(
    project_id: str,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    project_service: ProjectService = Depends(get_project_service),
):
    models = project_service.get_models(db, user_id, project_id)
    return [ModelResponse.model_validate(m) for m in models]


@router.patch("/projects/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    request: UpdateProjectRequest,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    project_service: ProjectService = Depends(get_project_service),
):
    """Partially update a project; settings groups are merged shallowly."""
    patch = request.model_dump(exclude_unset=True, exclude_none=True)
    project = project_service.update(db, user_id, project_id, patch)
    return ProjectResponse.model_validate(project)
