"""
Folder-related Pydantic schemas.
"""
from pydantic import BaseModel, ConfigDict, Field

from snapshare.schemas.common import EntityId


class FolderBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    photographer_id: EntityId


class FolderCreate(FolderBase):
    """Schema for folder creation."""

    pass


class FolderUpdate(FolderBase):
    """Schema for a full replace of a folder."""

    pass


class FolderResponse(FolderBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
