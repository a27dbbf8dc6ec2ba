"""
Photo service: CRUD over the photos table and the per-album listing.
"""
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from snapshare.models.photo import Photo
from snapshare.schemas.photo import PhotoCreate, PhotoUpdate


class PhotoService:
    """Service for handling photo references."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_photo(self, data: PhotoCreate) -> int:
        photo = Photo(url=data.url, album_id=data.album_id)
        self.db.add(photo)
        await self.db.flush()
        return photo.id

    async def list_photos(self) -> List[Photo]:
        result = await self.db.execute(select(Photo).order_by(Photo.id))
        return list(result.scalars().all())

    async def get_photo_by_id(self, photo_id: int) -> Optional[Photo]:
        result = await self.db.execute(select(Photo).where(Photo.id == photo_id))
        return result.scalar_one_or_none()

    async def list_photos_by_album(self, album_id: int) -> List[Photo]:
        result = await self.db.execute(
            select(Photo).where(Photo.album_id == album_id).order_by(Photo.id)
        )
        return list(result.scalars().all())

    async def update_photo(self, photo_id: int, data: PhotoUpdate) -> int:
        """
        Replace url and album_id of a photo.

        Returns:
            Number of rows updated (0 or 1)
        """
        result = await self.db.execute(
            update(Photo)
            .where(Photo.id == photo_id)
            .values(url=data.url, album_id=data.album_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def delete_photo(self, photo_id: int) -> int:
        result = await self.db.execute(
            delete(Photo)
            .where(Photo.id == photo_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
