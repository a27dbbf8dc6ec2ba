"""
Pydantic schemas package.
All schemas are exported here for easy import.
"""
from snapshare.schemas.common import (
    CreatedResponse,
    UpdatedResponse,
    DeletedResponse,
    MessageResponse,
    ErrorResponse,
)
from snapshare.schemas.photographer import (
    PhotographerCreate,
    PhotographerUpdate,
    PhotographerResponse,
    PhotographerLogin,
    PhotographerSummary,
    LoginResponse,
)
from snapshare.schemas.folder import (
    FolderCreate,
    FolderUpdate,
    FolderResponse,
)
from snapshare.schemas.album import (
    AlbumCreate,
    AlbumUpdate,
    AlbumSummary,
    AlbumResponse,
)
from snapshare.schemas.photo import (
    PhotoCreate,
    PhotoUpdate,
    PhotoResponse,
)

__all__ = [
    # Common
    "CreatedResponse",
    "UpdatedResponse",
    "DeletedResponse",
    "MessageResponse",
    "ErrorResponse",
    # Photographer schemas
    "PhotographerCreate",
    "PhotographerUpdate",
    "PhotographerResponse",
    "PhotographerLogin",
    "PhotographerSummary",
    "LoginResponse",
    # Folder schemas
    "FolderCreate",
    "FolderUpdate",
    "FolderResponse",
    # Album schemas
    "AlbumCreate",
    "AlbumUpdate",
    "AlbumSummary",
    "AlbumResponse",
    # Photo schemas
    "PhotoCreate",
    "PhotoUpdate",
    "PhotoResponse",
]
