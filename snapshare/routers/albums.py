"""
Albums router for album management.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from snapshare.database import get_db
from snapshare.exceptions import NotFoundError
from snapshare.schemas.album import AlbumCreate, AlbumResponse, AlbumUpdate
from snapshare.schemas.common import (
    CreatedResponse,
    DeletedResponse,
    ErrorResponse,
    MessageResponse,
    PathId,
    UpdatedResponse,
)
from snapshare.services.album import AlbumService
from snapshare.utils.prometheus_metrics import record_operation

router = APIRouter(prefix="/albums", tags=["Albums"])

NOT_FOUND_MESSAGE = "Album not found"

_errors = {
    status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new album",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def create_album(
    data: AlbumCreate,
    db: AsyncSession = Depends(get_db),
) -> CreatedResponse:
    """
    Create an album.

    - **download_count**, **download_limit**: default 0
    - **folder_id**: owning folder
    - **name**: album name

    The 6-digit **access_hash** is generated by the server.
    """
    try:
        album_id = await AlbumService(db).create_album(data)
    except Exception:
        record_operation("album", "create", "failure")
        raise
    record_operation("album", "create")
    return CreatedResponse(id=album_id)


@router.get(
    "",
    response_model=List[AlbumResponse],
    summary="Get all albums",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def list_albums(
    db: AsyncSession = Depends(get_db),
) -> List[AlbumResponse]:
    albums = await AlbumService(db).list_albums()
    return [AlbumResponse.model_validate(a) for a in albums]


@router.get(
    "/{album_id}",
    response_model=AlbumResponse,
    summary="Get an album by ID",
    responses=_errors,
)
async def get_album(
    album_id: PathId,
    db: AsyncSession = Depends(get_db),
) -> AlbumResponse:
    album = await AlbumService(db).get_album_by_id(album_id)
    if not album:
        raise NotFoundError(NOT_FOUND_MESSAGE, "album", album_id)
    return AlbumResponse.model_validate(album)


@router.put(
    "/{album_id}",
    response_model=UpdatedResponse,
    summary="Update an album by ID",
    responses=_errors,
)
async def update_album(
    album_id: PathId,
    data: AlbumUpdate,
    db: AsyncSession = Depends(get_db),
) -> UpdatedResponse:
    """
    Replace every field of an album, including **access_hash**.
    """
    updated = await AlbumService(db).update_album(album_id, data)
    if updated == 0:
        record_operation("album", "update", "not_found")
        raise NotFoundError(NOT_FOUND_MESSAGE, "album", album_id)
    record_operation("album", "update")
    return UpdatedResponse(updated=updated)


@router.delete(
    "/{album_id}",
    response_model=DeletedResponse,
    summary="Delete an album by ID",
    responses=_errors,
)
async def delete_album(
    album_id: PathId,
    db: AsyncSession = Depends(get_db),
) -> DeletedResponse:
    """
    Delete an album.

    Note: This only deletes the album, not the photos in it.
    """
    deleted = await AlbumService(db).delete_album(album_id)
    if deleted == 0:
        record_operation("album", "delete", "not_found")
        raise NotFoundError(NOT_FOUND_MESSAGE, "album", album_id)
    record_operation("album", "delete")
    return DeletedResponse(deleted=deleted)
