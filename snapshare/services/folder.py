"""
Folder service: CRUD over the folders table and the per-photographer listing.
"""
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from snapshare.models.folder import Folder
from snapshare.schemas.folder import FolderCreate, FolderUpdate


class FolderService:
    """Service for handling folder operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_folder(self, data: FolderCreate) -> int:
        """
        Insert a folder. The photographer reference is stored as given.

        Returns:
            ID of the new row
        """
        folder = Folder(name=data.name, photographer_id=data.photographer_id)
        self.db.add(folder)
        await self.db.flush()
        return folder.id

    async def list_folders(self) -> List[Folder]:
        result = await self.db.execute(select(Folder).order_by(Folder.id))
        return list(result.scalars().all())

    async def get_folder_by_id(self, folder_id: int) -> Optional[Folder]:
        result = await self.db.execute(select(Folder).where(Folder.id == folder_id))
        return result.scalar_one_or_none()

    async def list_folders_by_photographer(self, photographer_id: int) -> List[Folder]:
        """Return the folders whose photographer_id matches, in insertion order."""
        result = await self.db.execute(
            select(Folder)
            .where(Folder.photographer_id == photographer_id)
            .order_by(Folder.id)
        )
        return list(result.scalars().all())

    async def update_folder(self, folder_id: int, data: FolderUpdate) -> int:
        """
        Replace name and photographer_id of a folder.

        Returns:
            Number of rows updated (0 or 1)
        """
        result = await self.db.execute(
            update(Folder)
            .where(Folder.id == folder_id)
            .values(name=data.name, photographer_id=data.photographer_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def delete_folder(self, folder_id: int) -> int:
        """
        Delete a folder. Its albums are not deleted.

        Returns:
            Number of rows deleted (0 or 1)
        """
        result = await self.db.execute(
            delete(Folder)
            .where(Folder.id == folder_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
