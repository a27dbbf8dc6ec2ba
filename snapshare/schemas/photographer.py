"""
Photographer-related Pydantic schemas for request/response validation.
"""
from pydantic import BaseModel, ConfigDict, Field


class PhotographerBase(BaseModel):
    """Base schema with the public photographer attributes."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    document: str
    company_name: str
    logo: str
    description: str


class PhotographerCreate(PhotographerBase):
    """Schema for photographer creation."""

    password: str = Field(..., min_length=1)


class PhotographerUpdate(PhotographerCreate):
    """Schema for a full replace of a photographer; every field is required."""

    pass


class PhotographerResponse(PhotographerBase):
    """Schema for photographer response (excludes the password)."""

    id: int

    model_config = ConfigDict(from_attributes=True)


class PhotographerLogin(BaseModel):
    """Schema for photographer login."""

    email: str
    password: str


class PhotographerSummary(BaseModel):
    """Reduced projection returned after a successful login."""

    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    message: str
    photographer: PhotographerSummary
