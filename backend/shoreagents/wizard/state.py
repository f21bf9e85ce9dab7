"""Wizard state carried between the widget and the API.

The client holds the state and posts it back with every event; the
server never stores a half-finished wizard.
"""

from datetime import datetime, timezone
from typing import Literal

from pydantic import Field, model_validator

from shoreagents.config import settings
from shoreagents.schemas.candidate import Candidate
from shoreagents.schemas.common import CamelModel
from shoreagents.wizard.steps import (
    PER_MEMBER_STEPS,
    ExperienceLevel,
    RoleType,
    Step,
    Workplace,
    YesNo,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ChatMessage(CamelModel):
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime = Field(default_factory=_utcnow)


class TeamMember(CamelModel):
    role: str | None = None
    experience: ExperienceLevel | None = None
    workplace: Workplace | None = None


class WizardState(CamelModel):
    current_step: Step = Step.TEAM_SIZE
    user_id: str | None = None

    team_size: int | None = None
    role_type: RoleType | None = None
    industry: str | None = None
    # members[0] is team member 1
    members: list[TeamMember] = []
    current_member: int = 1

    experience_setup: YesNo | None = None
    experience: ExperienceLevel | None = None
    description: str | None = None
    workplace_setup: YesNo | None = None
    workplace_type: Workplace | None = None

    transcript: list[ChatMessage] = []
    candidate_recommendations: list[Candidate] = []

    @model_validator(mode="after")
    def _check_members(self) -> "WizardState":
        # Posted back by the client, so the member list must match the team
        size = self.team_size or 0
        if size > settings.max_team_size:
            raise ValueError(f"teamSize can be at most {settings.max_team_size}")
        if len(self.members) != size:
            raise ValueError(f"Expected {size} team member(s), got {len(self.members)}")
        if self.current_step in PER_MEMBER_STEPS and not 1 <= self.current_member <= size:
            raise ValueError(f"currentMember must be between 1 and {size}")
        return self

    def member(self, number: int) -> TeamMember:
        """Return team member `number` (1-indexed)."""
        return self.members[number - 1]

    @property
    def primary_role(self) -> str | None:
        return self.members[0].role if self.members else None

    def roles(self) -> list[str]:
        """Distinct member roles in member order."""
        seen: list[str] = []
        for m in self.members:
            if m.role and m.role not in seen:
                seen.append(m.role)
        return seen

    def form_data(self) -> dict[str, str]:
        """Flattened answers, keyed the way the widget and quote records use them."""
        data: dict[str, str] = {}
        if self.team_size is not None:
            data["teamSize"] = str(self.team_size)
        if self.role_type:
            data["roleType"] = self.role_type
        if self.industry:
            data["industry"] = self.industry
        for number, m in enumerate(self.members, start=1):
            if m.role:
                data[f"member{number}Role"] = m.role
            if m.experience:
                data[f"member{number}Experience"] = m.experience
            if m.workplace:
                data[f"member{number}Workplace"] = m.workplace
        if self.experience_setup:
            data["experienceSetup"] = self.experience_setup
        if self.experience:
            data["experience"] = self.experience
        if self.description:
            data["description"] = self.description
        if self.workplace_setup:
            data["workplaceSetup"] = self.workplace_setup
        if self.workplace_type:
            data["workplaceType"] = self.workplace_type
        return data
