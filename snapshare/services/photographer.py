"""
Photographer service: CRUD over the photographers table.
"""
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from snapshare.models.photographer import Photographer
from snapshare.schemas.photographer import PhotographerCreate, PhotographerUpdate
from snapshare.utils.logger import log_info
from snapshare.utils.security import hash_password


class PhotographerService:
    """
    Service for handling photographer accounts.
    The password is hashed before it reaches the table.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_photographer(self, data: PhotographerCreate) -> int:
        """
        Insert a photographer.

        Args:
            data: Photographer creation data

        Returns:
            ID of the new row

        Raises:
            sqlalchemy.exc.IntegrityError: If the email is already registered
        """
        photographer = Photographer(
            name=data.name,
            email=data.email,
            password=hash_password(data.password),
            document=data.document,
            company_name=data.company_name,
            logo=data.logo,
            description=data.description,
        )
        self.db.add(photographer)
        await self.db.flush()
        log_info("Photographer created", event="photographer", photographer_id=photographer.id)
        return photographer.id

    async def list_photographers(self) -> List[Photographer]:
        """Return every photographer in insertion order."""
        result = await self.db.execute(select(Photographer).order_by(Photographer.id))
        return list(result.scalars().all())

    async def get_photographer_by_id(self, photographer_id: int) -> Optional[Photographer]:
        """
        Get a photographer by ID.

        Returns:
            Photographer if found, None otherwise
        """
        result = await self.db.execute(
            select(Photographer).where(Photographer.id == photographer_id)
        )
        return result.scalar_one_or_none()

    async def update_photographer(
        self,
        photographer_id: int,
        data: PhotographerUpdate,
    ) -> int:
        """
        Replace every mutable field of a photographer.

        Returns:
            Number of rows updated (0 or 1)
        """
        result = await self.db.execute(
            update(Photographer)
            .where(Photographer.id == photographer_id)
            .values(
                name=data.name,
                email=data.email,
                password=hash_password(data.password),
                document=data.document,
                company_name=data.company_name,
                logo=data.logo,
                description=data.description,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def delete_photographer(self, photographer_id: int) -> int:
        """
        Delete a photographer. Folders that reference it are left untouched.

        Returns:
            Number of rows deleted (0 or 1)
        """
        result = await self.db.execute(
            delete(Photographer)
            .where(Photographer.id == photographer_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
