"""
Folder model: a named group of albums under one photographer.
"""
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from snapshare.database import Base


class Folder(Base):
    """Folder owned by a photographer."""

    __tablename__ = "folders"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # No ON DELETE action: removing a photographer leaves its folders in place
    photographer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("photographers.id"), nullable=False, index=True
    )

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, name={self.name})>"
