"""Pony schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

CAMEL_CASE = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PonyCreate(BaseModel):
    """Create a new pony."""

    model_config = CAMEL_CASE

    name: str = Field(..., min_length=1, max_length=255)
    element: str = Field(..., min_length=1, max_length=255)
    personality: str = Field(..., min_length=1, max_length=255)
    talent: str = Field(..., min_length=1, max_length=255)
    summary: str = Field(..., min_length=1, max_length=5000)
    image_url: str = Field(..., min_length=1, max_length=2048)
    is_favorite: bool = False

    @field_validator("name", "element", "personality", "talent", "summary", "image_url")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()


class PonyUpdate(BaseModel):
    """Update a pony. Only fields present in the request are applied."""

    model_config = CAMEL_CASE

    name: str | None = Field(None, min_length=1, max_length=255)
    element: str | None = Field(None, min_length=1, max_length=255)
    personality: str | None = Field(None, min_length=1, max_length=255)
    talent: str | None = Field(None, min_length=1, max_length=255)
    summary: str | None = Field(None, min_length=1, max_length=5000)
    image_url: str | None = Field(None, min_length=1, max_length=2048)
    is_favorite: bool | None = None

    # Defaults are not validated, so this only fires for an explicit null
    @field_validator("*")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        if isinstance(value, str):
            if not value.strip():
                raise ValueError("must not be blank")
            return value.strip()
        return value


class PonyResponse(BaseModel):
    """Full pony representation."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    element: str
    personality: str
    talent: str
    summary: str
    image_url: str
    is_favorite: bool
    created_at: datetime


class PonySummary(BaseModel):
    """Pony list entry."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    image_url: str
    is_favorite: bool


class UploadResponse(BaseModel):
    model_config = CAMEL_CASE

    image_url: str
