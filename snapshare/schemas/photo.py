"""
Photo-related Pydantic schemas.
"""
from pydantic import BaseModel, ConfigDict, Field

from snapshare.schemas.common import EntityId


class PhotoBase(BaseModel):
    url: str = Field(..., min_length=1, max_length=2048)
    album_id: EntityId


class PhotoCreate(PhotoBase):
    pass


class PhotoUpdate(PhotoBase):
    pass


class PhotoResponse(PhotoBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
