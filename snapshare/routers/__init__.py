"""
API routers package.
"""
from snapshare.routers.photographers import router as photographers_router
from snapshare.routers.folders import router as folders_router
from snapshare.routers.albums import router as albums_router
from snapshare.routers.photos import router as photos_router
from snapshare.routers.health import router as health_router

__all__ = [
    "photographers_router",
    "folders_router",
    "albums_router",
    "photos_router",
    "health_router",
]
