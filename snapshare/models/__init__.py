"""
Database models package.
All models are exported here for easy import.
"""
from snapshare.models.photographer import Photographer
from snapshare.models.folder import Folder
from snapshare.models.album import Album
from snapshare.models.photo import Photo

__all__ = ["Photographer", "Folder", "Album", "Photo"]
