"""Suggestions for the wizard's role, industry and description inputs."""

from fastapi import APIRouter

from shoreagents.schemas.autocomplete import AutocompleteRequest, Suggestion
from shoreagents.services.autocomplete import autocomplete

router = APIRouter()


@router.post("/autocomplete", response_model=list[Suggestion] | str)
async def get_suggestions(body: AutocompleteRequest):
    """Suggestion list, or a plain description string for type=description."""
    return autocomplete(body)
