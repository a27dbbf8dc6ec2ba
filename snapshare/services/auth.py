"""
Authentication service for photographer login.
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from snapshare.models.photographer import Photographer
from snapshare.utils.logger import log_info, log_warning
from snapshare.utils.security import verify_password


class AuthService:
    """
    Service for checking photographer credentials.
    No token or session is issued; a successful check is a one-shot
    confirmation.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def authenticate(self, email: str, password: str) -> Optional[Photographer]:
        """
        Authenticate a photographer with email and password.

        Args:
            email: Photographer email (exact match)
            password: Plain text password

        Returns:
            Photographer if authentication successful, None otherwise
        """
        photographer = await self._get_photographer_by_email(email)

        if not photographer:
            log_warning("Login failed", event="auth", reason="unknown_email")
            return None
        if not verify_password(password, photographer.password):
            log_warning(
                "Login failed",
                event="auth",
                photographer_id=photographer.id,
                reason="invalid_password",
            )
            return None
        log_info("Login", event="auth", photographer_id=photographer.id)
        return photographer

    async def _get_photographer_by_email(self, email: str) -> Optional[Photographer]:
        """Get photographer by email."""
        result = await self.db.execute(
            select(Photographer).where(Photographer.email == email)
        )
        return result.scalar_one_or_none()
