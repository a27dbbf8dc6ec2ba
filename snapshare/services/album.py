"""
Album service: CRUD over the albums table, access hash generation and
the per-folder listing.
"""
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from snapshare.models.album import Album
from snapshare.schemas.album import AlbumCreate, AlbumUpdate
from snapshare.utils.logger import log_info, log_warning
from snapshare.utils.security import generate_access_hash

# Attempts at drawing an access hash that no other album uses
MAX_ACCESS_HASH_ATTEMPTS = 10


class AlbumService:
    """
    Service for handling album operations.
    Includes album CRUD and access hash assignment.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_album(self, data: AlbumCreate) -> int:
        """
        Insert an album with a freshly generated access hash.

        Args:
            data: Album creation data

        Returns:
            ID of the new row
        """
        album = Album(
            access_hash=await self.generate_unique_access_hash(),
            download_count=data.download_count,
            download_limit=data.download_limit,
            folder_id=data.folder_id,
            name=data.name,
        )
        self.db.add(album)
        await self.db.flush()
        log_info("Album created", event="album", album_id=album.id, folder_id=album.folder_id)
        return album.id

    async def generate_unique_access_hash(self) -> str:
        """
        Draw access hashes until one is not used by any album.

        Uniqueness is best effort: two concurrent creates can still pick the
        same value, and after MAX_ACCESS_HASH_ATTEMPTS collisions the last
        candidate is used anyway.
        """
        for _ in range(MAX_ACCESS_HASH_ATTEMPTS):
            candidate = generate_access_hash()
            if not await self._access_hash_exists(candidate):
                return candidate
        log_warning(
            "Access hash collision limit reached",
            event="album",
            attempts=MAX_ACCESS_HASH_ATTEMPTS,
        )
        return candidate

    async def _access_hash_exists(self, access_hash: str) -> bool:
        result = await self.db.execute(
            select(Album.id).where(Album.access_hash == access_hash).limit(1)
        )
        return result.first() is not None

    async def list_albums(self) -> List[Album]:
        result = await self.db.execute(select(Album).order_by(Album.id))
        return list(result.scalars().all())

    async def get_album_by_id(self, album_id: int) -> Optional[Album]:
        """
        Get an album by ID.

        Returns:
            Album if found, None otherwise
        """
        result = await self.db.execute(select(Album).where(Album.id == album_id))
        return result.scalar_one_or_none()

    async def list_albums_by_folder(self, folder_id: int) -> List[Row]:
        """
        Return the albums of a folder as rows of
        (id, access_hash, download_count, download_limit, folder_id).
        """
        result = await self.db.execute(
            select(
                Album.id,
                Album.access_hash,
                Album.download_count,
                Album.download_limit,
                Album.folder_id,
            )
            .where(Album.folder_id == folder_id)
            .order_by(Album.id)
        )
        return list(result.all())

    async def update_album(self, album_id: int, data: AlbumUpdate) -> int:
        """
        Replace every field of an album, access hash included.

        Returns:
            Number of rows updated (0 or 1)
        """
        result = await self.db.execute(
            update(Album)
            .where(Album.id == album_id)
            .values(
                access_hash=data.access_hash,
                download_count=data.download_count,
                download_limit=data.download_limit,
                folder_id=data.folder_id,
                name=data.name,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def delete_album(self, album_id: int) -> int:
        """
        Delete an album. Its photos are not deleted.

        Returns:
            Number of rows deleted (0 or 1)
        """
        result = await self.db.execute(
            delete(Album)
            .where(Album.id == album_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
