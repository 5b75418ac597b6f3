"""
Presence API router.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session as DBSession

from ..dependencies import get_collaboration_service, get_db, get_user_id
from ..services.collaboration_service import CollaborationService
from .dto.requests import HeartbeatRequest
from .dto.responses import PresenceResponse

router = APIRouter()


@router.put("/projects/{project_id}/presence", response_model=PresenceResponse)
async def heartbeat(
    project_id: str,
    request: HeartbeatRequest,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    collaboration_service: CollaborationService = Depends(get_collaboration_service),
):
    """Record that the caller is present in the project, optionally with a cursor."""
    session = collaboration_service.heartbeat(db, user_id, project_id, cursor=request.cursor)
    return PresenceResponse.model_validate(session)


@router.delete("/projects/{project_id}/presence", status_code=status.HTTP_204_NO_CONTENT)
async def leave(
    project_id: str,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    collaboration_service: CollaborationService = Depends(get_collaboration_service),
):
    collaboration_service.leave(db, user_id, project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/projects/{project_id}/presence", response_model=list[PresenceResponse])
async def list_active(
    project_id: str,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    collaboration_service: CollaborationService = Depends(get_collaboration_service),
):
    sessions = collaboration_service.list_active(db, user_id, project_id)
    return [PresenceResponse.model_validate(s) for s in sessions]
