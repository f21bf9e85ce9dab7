"""Step identifiers and answer choices for the pricing wizard."""

import enum
from typing import Literal


class Step(str, enum.Enum):
    TEAM_SIZE = "teamSize"
    ROLE_TYPE = "roleType"
    INDUSTRY = "industry"
    INDIVIDUAL_ROLES = "individualRoles"
    EXPERIENCE_SETUP = "experienceSetup"
    EXPERIENCE = "experience"
    EXPERIENCE_INDIVIDUAL = "experienceIndividual"
    DESCRIPTION = "description"
    WORKPLACE_SETUP = "workplaceSetup"
    WORKPLACE_TYPE = "workplaceType"
    WORKPLACE_INDIVIDUAL = "workplaceIndividual"
    SUMMARY = "summary"
    CANDIDATE_RECOMMENDATION = "candidateRecommendation"
    SHOW_CANDIDATES = "showCandidates"
    NONE = "none"


# Steps that loop over team members using the currentMember cursor
PER_MEMBER_STEPS = frozenset({
    Step.INDIVIDUAL_ROLES,
    Step.EXPERIENCE_INDIVIDUAL,
    Step.WORKPLACE_INDIVIDUAL,
})

RoleType = Literal["same", "different"]
YesNo = Literal["yes", "no"]
ExperienceLevel = Literal["entry", "mid", "senior", "mixed"]
Workplace = Literal["work-from-home", "hybrid", "full-office"]

ROLE_TYPES: tuple[str, ...] = ("same", "different")
YES_NO: tuple[str, ...] = ("yes", "no")
EXPERIENCE_LEVELS: tuple[str, ...] = ("entry", "mid", "senior", "mixed")
WORKPLACES: tuple[str, ...] = ("work-from-home", "hybrid", "full-office")

EXPERIENCE_LABELS = {
    "entry": "Entry level (0-2 years of experience)",
    "mid": "Mid level (3-5 years of experience)",
    "senior": "Senior level (6+ years of experience)",
    "mixed": "Mixed experience levels",
}

WORKPLACE_LABELS = {
    "work-from-home": "Work from home",
    "hybrid": "Hybrid",
    "full-office": "Full office",
}
