"""Request/response schemas for the pricing wizard endpoints."""

from pydantic import BaseModel

from shoreagents.schemas.common import CamelModel
from shoreagents.wizard.events import WizardEvent
from shoreagents.wizard.state import WizardState


class WizardStart(CamelModel):
    user_id: str | None = None


class WizardAdvance(CamelModel):
    state: WizardState
    event: WizardEvent


class WizardStateOnly(CamelModel):
    state: WizardState


class SummaryRow(BaseModel):
    field: str
    label: str
    value: str


class WizardResponse(CamelModel):
    state: WizardState
    prompt: str | None = None
    summary: list[SummaryRow] | None = None


class DescriptionSuggestion(CamelModel):
    description: str
