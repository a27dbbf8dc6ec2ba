"""
Services package.
One service class per resource; each wraps an AsyncSession.
"""
from snapshare.services.photographer import PhotographerService
from snapshare.services.folder import FolderService
from snapshare.services.album import AlbumService
from snapshare.services.photo import PhotoService
from snapshare.services.auth import AuthService

__all__ = [
    "PhotographerService",
    "FolderService",
    "AlbumService",
    "PhotoService",
    "AuthService",
]
