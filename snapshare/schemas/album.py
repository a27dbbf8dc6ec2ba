"""
Album-related Pydantic schemas for request/response validation.
"""
from pydantic import BaseModel, ConfigDict, Field

from snapshare.schemas.common import INT64_MAX, EntityId

ACCESS_HASH_PATTERN = r"^[0-9]{6}$"


class AlbumCreate(BaseModel):
    """
    Schema for album creation.
    The access hash is generated by the server and cannot be supplied.
    """

    download_count: int = Field(default=0, ge=0, le=INT64_MAX)
    download_limit: int = Field(default=0, ge=0, le=INT64_MAX)
    folder_id: EntityId
    name: str = Field(..., min_length=1, max_length=255)


class AlbumUpdate(BaseModel):
    """Schema for a full replace of an album, access hash included."""

    access_hash: str = Field(..., pattern=ACCESS_HASH_PATTERN)
    download_count: int = Field(..., ge=0, le=INT64_MAX)
    download_limit: int = Field(..., ge=0, le=INT64_MAX)
    folder_id: EntityId
    name: str = Field(..., min_length=1, max_length=255)


class AlbumSummary(BaseModel):
    """Album projection used when listing the albums of a folder."""

    id: int
    access_hash: str
    download_count: int
    download_limit: int
    folder_id: EntityId

    model_config = ConfigDict(from_attributes=True)


class AlbumResponse(AlbumSummary):
    """Schema for album response."""

    name: str
