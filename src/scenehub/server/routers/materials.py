"""
Material library API router.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session as DBSession

from ...shared.exceptions import EntityNotFoundError
from ..dependencies import get_db, get_material_service, get_user_id
from ..services.material_service import MaterialService
from .dto.requests import CreateMaterialRequest, UpdateMaterialRequest
from .dto.responses import MaterialResponse

router = APIRouter()


@router.post(
    "/workspaces/{workspace_id}/materials",
    response_model=MaterialResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_material(
    workspace_id: str,
    request: CreateMaterialRequest,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    material_service: MaterialService = Depends(get_material_service),
):
    entry = material_service.create(
        db,
        user_id,
        workspace_id,
        name=request.name,
        material=request.material,
        is_public=request.is_public,
    )
    return MaterialResponse.model_validate(entry)


@router.get("/workspaces/{workspace_id}/materials", response_model=list[MaterialResponse])
async def list_materials(
    workspace_id: str,
    search: Optional[str] = Query(None, max_length=255, description="Match on name or type"),
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    material_service: MaterialService = Depends(get_material_service),
):
    entries = material_service.list_for_workspace(db, user_id, workspace_id, search=search)
    return [MaterialResponse.model_validate(e) for e in entries]


@router.get("/materials/{material_id}", response_model=MaterialResponse)
async def get_material(
    material_id: str,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    material_service: MaterialService = Depends(get_material_service),
):
    entry = material_service.get_by_id(db, user_id, material_id)
    if entry is None:
        raise EntityNotFoundError("material", material_id)
    return MaterialResponse.model_validate(entry)


@router.patch("/materials/{material_id}", response_model=MaterialResponse)
async def update_material(
    material_id: str,
    request: UpdateMaterialRequest,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    material_service: MaterialService = Depends(get_material_service),
):
    patch = {
        field: getattr(request, field)
        for field in request.model_fields_set
    }
    entry = material_service.update(db, user_id, material_id, patch)
    return MaterialResponse.model_validate(entry)


@router.delete("/materials/{material_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_material(
    material_id: str,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    material_service: MaterialService = Depends(get_material_service),
):
    material_service.delete(db, user_id, material_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
