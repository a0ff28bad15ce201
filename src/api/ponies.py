"""Pony API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from src.api.dependencies import get_current_user, get_image_storage, get_pony_service
from src.schemas.error import ErrorResponse
from src.schemas.pony import PonyCreate, PonyResponse, PonySummary, PonyUpdate, UploadResponse
from src.services.pony_service import PonyService
from src.services.uploads import ImageStorage

# Every route here requires a valid bearer token
router = APIRouter(
    prefix="/ponies",
    tags=["ponies"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"model": ErrorResponse}},
)

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("", response_model=list[PonySummary])
def list_ponies(
    pony_service: Annotated[PonyService, Depends(get_pony_service)],
):
    """List all ponies ordered by name."""
    return pony_service.list()


@router.post("", response_model=PonyResponse, status_code=status.HTTP_201_CREATED)
def create_pony(
    pony_data: PonyCreate,
    pony_service: Annotated[PonyService, Depends(get_pony_service)],
):
    """Create a new pony."""
    return pony_service.create(pony_data)


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}},
)
async def upload_image(
    storage: Annotated[ImageStorage, Depends(get_image_storage)],
    file: Annotated[
        UploadFile | None, File(description="Pony image (JPEG, PNG, GIF, or WebP)")
    ] = None,
):
    """Upload a pony image and get back the URL to store in ``imageUrl``."""
    image_url = await storage.process_upload(file)
    return UploadResponse(image_url=image_url)


@router.get("/{pony_id}", response_model=PonyResponse, responses=NOT_FOUND)
def get_pony(
    pony_id: str,
    pony_service: Annotated[PonyService, Depends(get_pony_service)],
):
    """Get a specific pony."""
    return pony_service.get(pony_id)


@router.put("/{pony_id}", response_model=PonyResponse, responses=NOT_FOUND)
def update_pony(
    pony_id: str,
    pony_data: PonyUpdate,
    pony_service: Annotated[PonyService, Depends(get_pony_service)],
):
    """Update the fields present in the request body."""
    return pony_service.update(pony_id, pony_data)


@router.delete("/{pony_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_pony(
    pony_id: str,
    pony_service: Annotated[PonyService, Depends(get_pony_service)],
):
    """Delete a pony permanently."""
    pony_service.remove(pony_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{pony_id}/favorite", response_model=PonyResponse, responses=NOT_FOUND)
def mark_favorite(
    pony_id: str,
    pony_service: Annotated[PonyService, Depends(get_pony_service)],
):
    """Mark a pony as favorite."""
    return pony_service.set_favorite(pony_id, True)


@router.delete("/{pony_id}/favorite", response_model=PonyResponse, responses=NOT_FOUND)
def unmark_favorite(
    pony_id: str,
    pony_service: Annotated[PonyService, Depends(get_pony_service)],
):
    """Remove a pony from favorites."""
    return pony_service.set_favorite(pony_id, False)
