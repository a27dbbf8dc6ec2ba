"""
Photos router: photo CRUD and photos-by-album listing.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from snapshare.database import get_db
from snapshare.exceptions import NotFoundError
from snapshare.schemas.common import (
    CreatedResponse,
    DeletedResponse,
    ErrorResponse,
    MessageResponse,
    PathId,
    UpdatedResponse,
)
from snapshare.schemas.photo import PhotoCreate, PhotoResponse, PhotoUpdate
from snapshare.services.album import AlbumService
from snapshare.services.photo import PhotoService
from snapshare.utils.prometheus_metrics import record_operation

router = APIRouter(prefix="/photos", tags=["Photos"])

NOT_FOUND_MESSAGE = "Photo not found"

_errors = {
    status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new photo",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def create_photo(
    data: PhotoCreate,
    db: AsyncSession = Depends(get_db),
) -> CreatedResponse:
    try:
        photo_id = await PhotoService(db).create_photo(data)
    except Exception:
        record_operation("photo", "create", "failure")
        raise
    record_operation("photo", "create")
    return CreatedResponse(id=photo_id)


@router.get(
    "",
    response_model=List[PhotoResponse],
    summary="Get all photos",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def list_photos(
    db: AsyncSession = Depends(get_db),
) -> List[PhotoResponse]:
    photos = await PhotoService(db).list_photos()
    return [PhotoResponse.model_validate(p) for p in photos]


@router.get(
    "/{photo_id}",
    response_model=PhotoResponse,
    summary="Get a photo by ID",
    responses=_errors,
)
async def get_photo(
    photo_id: PathId,
    db: AsyncSession = Depends(get_db),
) -> PhotoResponse:
    photo = await PhotoService(db).get_photo_by_id(photo_id)
    if not photo:
        raise NotFoundError(NOT_FOUND_MESSAGE, "photo", photo_id)
    return PhotoResponse.model_validate(photo)


@router.put(
    "/{photo_id}",
    response_model=UpdatedResponse,
    summary="Update a photo by ID",
    responses=_errors,
)
async def update_photo(
    photo_id: PathId,
    data: PhotoUpdate,
    db: AsyncSession = Depends(get_db),
) -> UpdatedResponse:
    updated = await PhotoService(db).update_photo(photo_id, data)
    if updated == 0:
        record_operation("photo", "update", "not_found")
        raise NotFoundError(NOT_FOUND_MESSAGE, "photo", photo_id)
    record_operation("photo", "update")
    return UpdatedResponse(updated=updated)


@router.delete(
    "/{photo_id}",
    response_model=DeletedResponse,
    summary="Delete a photo by ID",
    responses=_errors,
)
async def delete_photo(
    photo_id: PathId,
    db: AsyncSession = Depends(get_db),
) -> DeletedResponse:
    deleted = await PhotoService(db).delete_photo(photo_id)
    if deleted == 0:
        record_operation("photo", "delete", "not_found")
        raise NotFoundError(NOT_FOUND_MESSAGE, "photo", photo_id)
    record_operation("photo", "delete")
    return DeletedResponse(deleted=deleted)


@router.get(
    "/{album_id}/photos",
    response_model=List[PhotoResponse],
    summary="Get the photos of an album",
    responses=_errors,
)
async def list_album_photos(
    album_id: PathId,
    db: AsyncSession = Depends(get_db),
) -> List[PhotoResponse]:
    """
    List the photos of an album.

    404 when the album is unknown or has no photos.
    """
    photos = await PhotoService(db).list_photos_by_album(album_id)
    if not photos:
        album = await AlbumService(db).get_album_by_id(album_id)
        if not album:
            raise NotFoundError("Album not found", "album", album_id)
        raise NotFoundError("No photos found for album", "photo")
    return [PhotoResponse.model_validate(p) for p in photos]
