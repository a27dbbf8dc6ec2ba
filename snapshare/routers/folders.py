"""
Folders router: folder CRUD plus folders-by-photographer and
albums-by-folder listings.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from snapshare.database import get_db
from snapshare.exceptions import NotFoundError
from snapshare.schemas.album import AlbumSummary
from snapshare.schemas.common import (
    CreatedResponse,
    DeletedResponse,
    ErrorResponse,
    MessageResponse,
    PathId,
    UpdatedResponse,
)
from snapshare.schemas.folder import FolderCreate, FolderResponse, FolderUpdate
from snapshare.services.album import AlbumService
from snapshare.services.folder import FolderService
from snapshare.services.photographer import PhotographerService
from snapshare.utils.prometheus_metrics import record_operation

router = APIRouter(prefix="/folders", tags=["Folders"])

NOT_FOUND_MESSAGE = "Folder not found"

_errors = {
    status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new folder",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def create_folder(
    data: FolderCreate,
    db: AsyncSession = Depends(get_db),
) -> CreatedResponse:
    try:
        folder_id = await FolderService(db).create_folder(data)
    except Exception:
        record_operation("folder", "create", "failure")
        raise
    record_operation("folder", "create")
    return CreatedResponse(id=folder_id)


@router.get(
    "",
    response_model=List[FolderResponse],
    summary="Get all folders",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def list_folders(
    db: AsyncSession = Depends(get_db),
) -> List[FolderResponse]:
    folders = await FolderService(db).list_folders()
    return [FolderResponse.model_validate(f) for f in folders]


@router.get(
    "/{folder_id}",
    response_model=FolderResponse,
    summary="Get a folder by ID",
    responses=_errors,
)
async def get_folder(
    folder_id: PathId,
    db: AsyncSession = Depends(get_db),
) -> FolderResponse:
    folder = await FolderService(db).get_folder_by_id(folder_id)
    if not folder:
        raise NotFoundError(NOT_FOUND_MESSAGE, "folder", folder_id)
    return FolderResponse.model_validate(folder)


@router.put(
    "/{folder_id}",
    response_model=UpdatedResponse,
    summary="Update a folder by ID",
    responses=_errors,
)
async def update_folder(
    folder_id: PathId,
    data: FolderUpdate,
    db: AsyncSession = Depends(get_db),
) -> UpdatedResponse:
    updated = await FolderService(db).update_folder(folder_id, data)
    if updated == 0:
        record_operation("folder", "update", "not_found")
        raise NotFoundError(NOT_FOUND_MESSAGE, "folder", folder_id)
    record_operation("folder", "update")
    return UpdatedResponse(updated=updated)


@router.delete(
    "/{folder_id}",
    response_model=DeletedResponse,
    summary="Delete a folder by ID",
    responses=_errors,
)
async def delete_folder(
    folder_id: PathId,
    db: AsyncSession = Depends(get_db),
) -> DeletedResponse:
    """
    Delete a folder.

    Note: albums in the folder are not deleted.
    """
    deleted = await FolderService(db).delete_folder(folder_id)
    if deleted == 0:
        record_operation("folder", "delete", "not_found")
        raise NotFoundError(NOT_FOUND_MESSAGE, "folder", folder_id)
    record_operation("folder", "delete")
    return DeletedResponse(deleted=deleted)


# ============== Relationships ==============


@router.get(
    "/{photographer_id}/folders",
    response_model=List[FolderResponse],
    summary="Get the folders of a photographer",
    responses=_errors,
)
async def list_photographer_folders(
    photographer_id: PathId,
    db: AsyncSession = Depends(get_db),
) -> List[FolderResponse]:
    """
    List the folders of a photographer.

    404 when nothing matches: the message tells an unknown photographer
    apart from a photographer without folders.
    """
    folders = await FolderService(db).list_folders_by_photographer(photographer_id)
    if not folders:
        photographer = await PhotographerService(db).get_photographer_by_id(photographer_id)
        if not photographer:
            raise NotFoundError("Photographer not found", "photographer", photographer_id)
        raise NotFoundError("No folders found for photographer", "folder")
    return [FolderResponse.model_validate(f) for f in folders]


@router.get(
    "/{folder_id}/albums",
    response_model=List[AlbumSummary],
    summary="Get the albums of a folder",
    responses=_errors,
)
async def list_folder_albums(
    folder_id: PathId,
    db: AsyncSession = Depends(get_db),
) -> List[AlbumSummary]:
    """
    List the albums of a folder (id, access_hash, download_count,
    download_limit, folder_id).

    404 when the folder is unknown or has no albums.
    """
    rows = await AlbumService(db).list_albums_by_folder(folder_id)
    if not rows:
        folder = await FolderService(db).get_folder_by_id(folder_id)
        if not folder:
            raise NotFoundError(NOT_FOUND_MESSAGE, "folder", folder_id)
        raise NotFoundError("No albums found for folder", "album")
    return [AlbumSummary.model_validate(row) for row in rows]
