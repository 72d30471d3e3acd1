"""Planet Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - PlanetData.name: 1-255 chars, stripped, non-empty
    - diameter and moons are non-negative when present
    - Unknown fields are rejected (extra="forbid")
    - Wire format is camelCase; Python attributes are snake_case

Design Decisions:
    - PlanetData is the whole domain payload: PUT writes model_dump() as-is, so omitted
      optional fields become None (full replacement, no merge)
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class PlanetData(BaseModel):
    """Planet create/replace payload."""
    model_config = ConfigDict(
        extra="forbid", alias_generator=to_camel, populate_by_name=True,
    )

    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(None, max_length=5000)
    diameter: int | None = Field(None, ge=0)
    moons: int | None = Field(None, ge=0)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class PlanetResponse(BaseModel):
    """Planet as returned by every read and write endpoint."""
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True,
    )

    id: int
    name: str
    description: str | None = None
    diameter: int | None = None
    moons: int | None = None
    photo_filename: str | None = None
    created_at: datetime
    created_by: str
    updated_at: datetime
    updated_by: str

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)


class PhotoUploadResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    photo_filename: str
