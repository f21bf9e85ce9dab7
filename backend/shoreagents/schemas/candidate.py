"""Candidate recommendation schemas."""

from typing import Any

from pydantic import BaseModel, Field

from shoreagents.schemas.common import CamelModel


class Candidate(CamelModel):
    id: str
    name: str
    position: str | None = None
    experience: str
    skills: list[str] = []
    expected_salary: str | None = None
    match_score: float = Field(ge=0.0, le=1.0)
    is_recommended: bool = False


class BpocUsersResponse(BaseModel):
    success: bool
    data: list[dict[str, Any]]
    total: int
