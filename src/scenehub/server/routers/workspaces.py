"""
Workspace and membership API router.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session as DBSession

from ...shared.exceptions import EntityNotFoundError
from ..dependencies import get_db, get_user_id, get_workspace_service
from ..services.workspace_service import WorkspaceService
from .dto.requests import (
    AddMemberRequest,
    CreateWorkspaceRequest,
    UpdateMemberRoleRequest,
    UpdateWorkspaceRequest,
)
from .dto.responses import WorkspaceMemberResponse, WorkspaceResponse

router = APIRouter()


@router.post(
    "/workspaces", response_model=WorkspaceResponse, status_code=status.HTTP_201_CREATED
)
async def create_workspace(
    request: CreateWorkspaceRequest,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    workspace_service: WorkspaceService = Depends(get_workspace_service),
):
    """Create a workspace; the caller becomes its owner."""
    workspace = workspace_service.create(
        db,
        user_id,
        name=request.name,
        description=request.description,
        is_public=request.is_public,
        settings=request.settings,
    )
    return WorkspaceResponse.model_validate({**workspace.model_dump(), "role": "owner"})


@router.get("/workspaces", response_model=list[WorkspaceResponse])
async def list_workspaces(
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    workspace_service: WorkspaceService = Depends(get_workspace_service),
):
    """List the workspaces the caller belongs to."""
    workspaces = workspace_service.list_for_user(db, user_id)
    return [WorkspaceResponse.model_validate(w) for w in workspaces]


@router.get("/workspaces/{workspace_id}", response_model=WorkspaceResponse)
async def get_workspace(
    workspace_id: str,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    workspace_service: WorkspaceService = Depends(get_workspace_service),
):
    workspace = workspace_service.get_by_id(db, user_id, workspace_id)
    if workspace is None:
        raise EntityNotFoundError("workspace", workspace_id)
    return WorkspaceResponse.model_validate(workspace)


@router.patch("/workspaces/{workspace_id}", response_model=WorkspaceResponse)
async def update_workspace(
    workspace_id: str,
    request: UpdateWorkspaceRequest,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    workspace_service: WorkspaceService = Depends(get_workspace_service),
):
    """Partially update a workspace. Requires the owner or admin role."""
    workspace = workspace_service.update(
        db, user_id, workspace_id, request.model_dump(exclude_unset=True, exclude_none=True)
    )
    return WorkspaceResponse.model_validate(workspace)


@router.get("/workspaces/{workspace_id}/members", response_model=list[WorkspaceMemberResponse])
async def list_members(
    workspace_id: str,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    workspace_service: WorkspaceService = Depends(get_workspace_service),
):
    members = workspace_service.list_members(db, user_id, workspace_id)
    return [WorkspaceMemberResponse.model_validate(m) for m in members]


@router.post(
    "/workspaces/{workspace_id}/members",
    response_model=WorkspaceMemberResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_member(
    workspace_id: str,
    request: AddMemberRequest,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    workspace_service: WorkspaceService = Depends(get_workspace_service),
):
    member = workspace_service.add_member(
        db, user_id, workspace_id, request.user_id, request.role
    )
    return WorkspaceMemberResponse.model_validate(member)


@router.patch(
    "/workspaces/{workspace_id}/members/{member_user_id}",
    response_model=WorkspaceMemberResponse,
)
async def update_member_role(
    workspace_id: str,
    member_user_id: str,
    request: UpdateMemberRoleRequest,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    workspace_service: WorkspaceService = Depends(get_workspace_service),
):
    member = workspace_service.update_member_role(
        db, user_id, workspace_id, member_user_id, request.role
    )
    return WorkspaceMemberResponse.model_validate(member)


@router.delete(
    "/workspaces/{workspace_id}/members/{member_user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_member(
    workspace_id: str,
    member_user_id: str,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    workspace_service: WorkspaceService = Depends(get_workspace_service),
):
    workspace_service.remove_member(db, user_id, workspace_id, member_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
