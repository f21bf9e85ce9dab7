"""Schemas for quote persistence and job description generation."""

from pydantic import field_validator

from shoreagents.schemas.common import CamelModel


class SavePricingInfoRequest(CamelModel):
    user_id: str | None = None
    team_size: int | None = None
    role_type: str | None = None
    roles: str | None = None
    experience: str | None = None
    description: str | None = None
    industry: str | None = None
    workplace: str | None = None
    form_data: dict[str, str] = {}

    @field_validator("team_size", mode="before")
    @classmethod
    def _blank_team_size(cls, v):
        # The widget posts team size as the text the user typed
        if isinstance(v, str) and not v.strip():
            return None
        return v


class SavePricingInfoResponse(CamelModel):
    success: bool
    id: str
    user_id: str


class JobDescriptionRequest(CamelModel):
    team_size: str | int | None = None
    role_type: str | None = None
    roles: str | None = None
    experience: str | None = None
    industry: str | None = None
    budget: str | None = None


class JobDescriptionResponse(CamelModel):
    success: bool
    description: str
