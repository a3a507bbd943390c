"""
Pydantic schemas for locations.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class LocationCreate(BaseModel):
    code: str = Field(min_length=1, max_length=20)
    name: str = Field(min_length=1, max_length=100)
    building: str | None = Field(default=None, max_length=100)
    floor: str | None = Field(default=None, max_length=20)
    room: str | None = Field(default=None, max_length=50)
    description: str | None = None


class LocationUpdate(BaseModel):
    """Partial update. Only the fields the client sends are changed."""
    code: str | None = Field(default=None, min_length=1, max_length=20)
    name: str | None = Field(default=None, min_length=1, max_length=100)
    building: str | None = Field(default=None, max_length=100)
    floor: str | None = Field(default=None, max_length=20)
    room: str | None = Field(default=None, max_length=50)
    description: str | None = None


class LocationResponse(BaseModel):
    id: int
    code: str
    name: str
    building: str | None
    floor: str | None
    room: str | None
    description: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
