"""
Album model: photos grouped for delivery behind a public access hash.
"""
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from snapshare.database import Base


class Album(Base):
    """Album inside a folder, with a download counter and limit."""

    __tablename__ = "albums"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    # 6-digit numeric string, generated on creation
    access_hash: Mapped[str] = mapped_column(String(6), nullable=False, index=True)
    download_count: Mapped[int] = mapped_column(
        Integer, default=0, server_default="0"
    )
    download_limit: Mapped[int] = mapped_column(
        Integer, default=0, server_default="0"
    )
    folder_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("folders.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Album(id={self.id}, access_hash={self.access_hash})>"
