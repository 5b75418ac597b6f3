"""
Project version API router.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session as DBSession

from ...shared.exceptions import EntityNotFoundError
from ..dependencies import get_db, get_user_id, get_version_service
from ..services.version_service import VersionService
from .dto.requests import CreateVersionRequest
from .dto.responses import VersionResponse, VersionSummaryResponse

router = APIRouter()


@router.post(
    "/projects/{project_id}/versions",
    response_model=VersionSummaryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_version(
    project_id: str,
    request: CreateVersionRequest,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    version_service: VersionService = Depends(get_version_service),
):
    """Snapshot the project and its models as the next version."""
    version = version_service.create_snapshot(
        db, user_id, project_id, name=request.name, description=request.description
    )
    return VersionSummaryResponse.model_validate(version)


@router.get("/projects/{project_id}/versions", response_model=list[VersionSummaryResponse])
async def list_versions(
    project_id: str,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    version_service: VersionService = Depends(get_version_service),
):
    versions = version_service.list_versions(db, user_id, project_id)
    return [VersionSummaryResponse.model_validate(v) for v in versions]


@router.get("/versions/{version_id}", response_model=VersionResponse)
async def get_version(
    version_id: str,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    version_service: VersionService = Depends(get_version_service),
):
    version = version_service.get_version(db, user_id, version_id)
    if version is None:
        raise EntityNotFoundError("version", version_id)
    return VersionResponse.model_validate(version)
