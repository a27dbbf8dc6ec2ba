"""
Photo model. Only the URL is stored; files live elsewhere.
"""
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from snapshare.database import Base


class Photo(Base):
    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    album_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("albums.id"), nullable=False, index=True
    )

    def __repr__(self) -> str:
        return f"<Photo(id={self.id}, album_id={self.album_id})>"
