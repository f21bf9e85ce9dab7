"""Events accepted by the wizard and side effects it requests."""

from dataclasses import dataclass, field
from typing import Annotated, Literal, Union

from pydantic import Field

from shoreagents.schemas.common import CamelModel
from shoreagents.wizard.steps import Step


# ── Events (client → wizard) ────────────────────────────────

class AnswerEvent(CamelModel):
    """Answer for the active step.

    `step` is optional; when sent it must match the active step so a
    double-clicked button cannot answer the following question.
    """
    kind: Literal["answer"] = "answer"
    value: str = ""
    step: Step | None = None


class ConfirmEvent(CamelModel):
    kind: Literal["confirm"] = "confirm"


class EditEvent(CamelModel):
    kind: Literal["edit"] = "edit"
    field: str


class CloseEvent(CamelModel):
    kind: Literal["close"] = "close"


WizardEvent = Annotated[
    Union[AnswerEvent, ConfirmEvent, EditEvent, CloseEvent],
    Field(discriminator="kind"),
]


# ── Effects (wizard → collaborators) ────────────────────────

@dataclass(frozen=True)
class SavePricingInfo:
    user_id: str
    form_data: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class FetchCandidates:
    role: str
    experience_level: str
    industry: str | None = None


Effect = Union[SavePricingInfo, FetchCandidates]
