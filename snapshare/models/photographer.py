"""
Photographer model: the account that owns folders.
"""
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from snapshare.database import Base


class Photographer(Base):
    """Photographer account and company profile."""

    __tablename__ = "photographers"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), unique=True, index=True, nullable=False
    )
    # Salted hash, never returned by the API
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    document: Mapped[str] = mapped_column(String(100), nullable=False)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    logo: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Photographer(id={self.id}, company_name={self.company_name})>"
