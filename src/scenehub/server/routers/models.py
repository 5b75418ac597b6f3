"""
Scene object ("model") API router.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session as DBSession

from ..dependencies import get_db, get_model_service, get_user_id
from ..services.model_service import ModelService
from .dto.requests import CreateModelRequest, SetVisibilityRequest, UpdateTransformRequest
from .dto.responses import ModelResponse

router = APIRouter()


@router.post("/models", response_model=ModelResponse, status_code=status.HTTP_201_CREATED)
async def create_model(
    request: CreateModelRequest,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    model_service: ModelService = Depends(get_model_service),
):
    scene_object = model_service.create(
        db,
        user_id,
        project_id=request.project_id,
        name=request.name,
        object_type=request.type,
        transform=request.transform,
        geometry=request.geometry,
        parent_id=request.parent_id,
        material=request.material,
    )
    return ModelResponse.model_validate(scene_object)


@router.put("/models/{model_id}/transform", response_model=ModelResponse)
async def update_model_transform(
    model_id: str,
    request: UpdateTransformRequest,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    model_service: ModelService = Depends(get_model_service),
):
    """Replace the model's transform; position, rotation and scale are all required."""
    scene_object = model_service.update_transform(
        db, user_id, model_id, request.transform.to_transform()
    )
    return ModelResponse.model_validate(scene_object)


@router.put("/models/{model_id}/visibility", response_model=ModelResponse)
async def set_model_visibility(
    model_id: str,
    request: SetVisibilityRequest,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    model_service: ModelService = Depends(get_model_service),
):
    scene_object = model_service.set_visibility(db, user_id, model_id, request.visible)
    return ModelResponse.model_validate(scene_object)


@router.delete("/models/{model_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_model(
    model_id: str,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    model_service: ModelService = Depends(get_model_service),
):
    """Delete a model. Its children are kept and retain their parent id."""
    model_service.remove(db, user_id, model_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/models/{model_id}/children", response_model=list[ModelResponse])
async def get_model_children(
    model_id: str,
    user_id: Optional[str] = Depends(get_user_id),
    db: DBSession = Depends(get_db),
    model_service: ModelService = Depends(get_model_service),
):
    children = model_service.get_children(db, user_id, model_id)
    return [ModelResponse.model_validate(c) for c in children]
