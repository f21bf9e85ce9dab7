"""Autocomplete request/response schemas."""

from typing import Literal

from pydantic import BaseModel

from shoreagents.schemas.common import CamelModel


class AutocompleteRequest(CamelModel):
    query: str = ""
    type: Literal["role", "industry", "description"] = "role"
    industry: str | None = None
    role_title: str | None = None


class Suggestion(BaseModel):
    title: str
    description: str
    level: str
