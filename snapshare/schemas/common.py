"""
Response bodies and id types shared by every resource.
"""
from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, Field

# SQLite INTEGER is a signed 64-bit value
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Foreign key / counter in a request body
EntityId = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]

# Identifier in the URL path
PathId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


class CreatedResponse(BaseModel):
    """Identifier of a newly inserted row."""

    id: int


class UpdatedResponse(BaseModel):
    """Number of rows replaced by a PUT."""

    updated: int


class DeletedResponse(BaseModel):
    """Number of rows removed by a DELETE."""

    deleted: int


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
