"""Schemas for the platform catalog endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class PlatformCreate(BaseModel):
    """Request body for POST /platform.

    Only `name` is required; everything else is stored as submitted.
    """

    name: str
    description: str = ""
    niches: list[str] = Field(default_factory=list)
    commission_rate: str = Field(alias="commissionRate", default="")
    api_url: str = Field(alias="apiUrl", default="")
    join_steps: list[str] = Field(alias="joinSteps", default_factory=list)

    model_config = {"populate_by_name": True}

    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("commission_rate", mode="before")
    @classmethod
    def _commission_as_text(cls, v: object) -> object:
        # 8 and 8.5 are accepted and kept in their string form
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        if v is None:
            return ""
        return v


class Platform(BaseModel):
    """A platform as returned by list/search/recommendation endpoints."""

    id: str
    name: str
    description: str = ""
    niches: list[str] = Field(default_factory=list)
    commission_rate: str = Field(alias="commissionRate", default="")
    api_url: str = Field(alias="apiUrl", default="")
    join_steps: list[str] = Field(alias="joinSteps", default_factory=list)
    created_at: datetime | None = Field(alias="createdAt", default=None)

    model_config = {"populate_by_name": True, "from_attributes": True}


class PlatformCreated(BaseModel):
    """Response payload for POST /platform."""

    success: bool = True
    message: str
    id: str
