"""Pricing wizard step sequencer.

    transition(state, event) -> Transition(state', effects)

The input state is never modified. Effects describe the collaborator
calls the caller must make (saving the quote, fetching candidates); the
sequencer itself performs no I/O.

Flow:
  teamSize → roleType (≥2) → industry → individualRoles (×N, or once if "same")
  → experience (N=1) | experienceSetup → experience | experienceIndividual (×N)
  → description → workplaceType (N=1) | workplaceSetup → workplaceType
  | workplaceIndividual (×N) → summary → candidateRecommendation
  → showCandidates | none
"""

from dataclasses import dataclass, field
from typing import Callable

from shoreagents.wizard import prompts
from shoreagents.wizard.events import (
    AnswerEvent,
    CloseEvent,
    ConfirmEvent,
    Effect,
    EditEvent,
    FetchCandidates,
    SavePricingInfo,
    WizardEvent,
)
from shoreagents.wizard.fields import (
    InvalidAnswer,
    anonymous_user_id,
    choice,
    optional_text,
    parse_team_size,
    require_text,
)
from shoreagents.wizard.state import ChatMessage, TeamMember, WizardState
from shoreagents.wizard.steps import (
    EXPERIENCE_LEVELS,
    PER_MEMBER_STEPS,
    ROLE_TYPES,
    WORKPLACES,
    YES_NO,
    Step,
)


@dataclass
class Transition:
    state: WizardState
    effects: list[Effect] = field(default_factory=list)


def new_state(user_id: str | None = None) -> WizardState:
    """Fresh wizard, as created when the widget opens."""
    state = WizardState(user_id=user_id)
    _say(state, prompts.question(state, Step.TEAM_SIZE))
    return state


def transition(state: WizardState, event: WizardEvent) -> Transition:
    """Apply one event. Raises InvalidAnswer and leaves `state` untouched."""
    step = state.current_step
    if isinstance(event, CloseEvent):
        closed = state.model_copy(deep=True)
        closed.current_step = Step.NONE
        return Transition(closed)

    if step == Step.NONE:
        raise InvalidAnswer(step.value, "The wizard is closed")

    new = state.model_copy(deep=True)

    if isinstance(event, EditEvent):
        if step != Step.SUMMARY:
            raise InvalidAnswer(step.value, "Answers can only be edited from the summary")
        return Transition(new, _edit(new, event.field))

    if isinstance(event, ConfirmEvent):
        if step != Step.SUMMARY:
            raise InvalidAnswer(step.value, "Nothing to confirm at this step")
        return Transition(new, _confirm(new))

    if isinstance(event, AnswerEvent):
        if event.step is not None and event.step != step:
            raise InvalidAnswer(step.value, f"Expected an answer for {step.value}, got {event.step.value}")
        handler = _ANSWER_HANDLERS.get(step)
        if handler is None:
            raise InvalidAnswer(step.value, f"Step {step.value} does not take an answer")
        return Transition(new, handler(new, event.value))

    raise InvalidAnswer(step.value, f"Unsupported event: {event!r}")


# ── Transcript helpers ───────────────────────────────────────

def _say(state: WizardState, content: str) -> None:
    state.transcript.append(ChatMessage(role="assistant", content=content))


def _heard(state: WizardState, step: Step, value: str, per_member: bool = False) -> None:
    member = state.current_member if per_member and (state.team_size or 0) > 1 else None
    state.transcript.append(ChatMessage(role="user", content=prompts.echo(step, value, member)))


# ── Step entry ───────────────────────────────────────────────

def _go(state: WizardState, step: Step) -> list[Effect]:
    """Make `step` active. Setup steps already answered replay their answer."""
    if step == Step.EXPERIENCE_SETUP and state.experience_setup is not None:
        return _after_experience_setup(state)
    if step == Step.WORKPLACE_SETUP and state.workplace_setup is not None:
        return _after_workplace_setup(state)

    state.current_step = step
    _say(state, prompts.question(state, step))

    if step == Step.SHOW_CANDIDATES:
        return [FetchCandidates(
            role=state.primary_role or "",
            experience_level=recommendation_level(state),
            industry=state.industry,
        )]
    return []


def _next_member(state: WizardState, step: Step, done: Step) -> list[Effect]:
    """Advance the member cursor, or leave the loop after the last member."""
    if state.current_member >= (state.team_size or 1):
        return _go(state, done)
    state.current_member += 1
    return _go(state, step)


def _after_experience_setup(state: WizardState) -> list[Effect]:
    if state.experience_setup == "yes":
        return _go(state, Step.EXPERIENCE)
    state.current_member = 1
    return _go(state, Step.EXPERIENCE_INDIVIDUAL)


def _after_workplace_setup(state: WizardState) -> list[Effect]:
    if state.workplace_setup == "yes":
        return _go(state, Step.WORKPLACE_TYPE)
    state.current_member = 1
    return _go(state, Step.WORKPLACE_INDIVIDUAL)


def recommendation_level(state: WizardState) -> str:
    """Experience level to rank candidates by (entry, mid or senior)."""
    level = state.experience
    if level is None and state.members:
        level = state.members[0].experience
    if level not in ("entry", "mid", "senior"):
        return "mid"
    return level


# ── Answer handlers ──────────────────────────────────────────

def _team_size(state: WizardState, raw: str) -> list[Effect]:
    size = parse_team_size(raw)
    state.team_size = size
    state.members = [TeamMember() for _ in range(size)]
    _heard(state, Step.TEAM_SIZE, str(size))
    if size >= 2:
        return _go(state, Step.ROLE_TYPE)
    state.current_member = 1
    return _go(state, Step.INDUSTRY)


def _role_type(state: WizardState, raw: str) -> list[Effect]:
    state.role_type = choice(raw, ROLE_TYPES, Step.ROLE_TYPE.value)
    _heard(state, Step.ROLE_TYPE, state.role_type)
    return _go(state, Step.INDUSTRY)


def _industry(state: WizardState, raw: str) -> list[Effect]:
    state.industry = require_text(raw, Step.INDUSTRY.value)
    _heard(state, Step.INDUSTRY, state.industry)
    state.current_member = 1
    return _go(state, Step.INDIVIDUAL_ROLES)


def _individual_roles(state: WizardState, raw: str) -> list[Effect]:
    role = require_text(raw, Step.INDIVIDUAL_ROLES.value)
    _heard(state, Step.INDIVIDUAL_ROLES, role, per_member=state.role_type != "same")
    state.member(state.current_member).role = role

    done = Step.EXPERIENCE if state.team_size == 1 else Step.EXPERIENCE_SETUP
    if state.role_type == "same":
        for m in state.members:
            m.role = role
        return _go(state, done)
    return _next_member(state, Step.INDIVIDUAL_ROLES, done)


def _experience_setup(state: WizardState, raw: str) -> list[Effect]:
    state.experience_setup = choice(raw, YES_NO, Step.EXPERIENCE_SETUP.value)
    _heard(state, Step.EXPERIENCE_SETUP, state.experience_setup)
    return _after_experience_setup(state)


def _experience(state: WizardState, raw: str) -> list[Effect]:
    level = choice(raw, EXPERIENCE_LEVELS, Step.EXPERIENCE.value)
    _heard(state, Step.EXPERIENCE, level)
    state.experience = level
    for m in state.members:
        m.experience = level
    return _go(state, Step.DESCRIPTION)


def _experience_individual(state: WizardState, raw: str) -> list[Effect]:
    level = choice(raw, EXPERIENCE_LEVELS, Step.EXPERIENCE_INDIVIDUAL.value)
    _heard(state, Step.EXPERIENCE_INDIVIDUAL, level, per_member=True)
    state.member(state.current_member).experience = level
    return _next_member(state, Step.EXPERIENCE_INDIVIDUAL, Step.DESCRIPTION)


def _description(state: WizardState, raw: str) -> list[Effect]:
    state.description = optional_text(raw)
    _heard(state, Step.DESCRIPTION, state.description)
    if state.team_size == 1:
        state.workplace_setup = "yes"
        return _go(state, Step.WORKPLACE_TYPE)
    return _go(state, Step.WORKPLACE_SETUP)


def _workplace_setup(state: WizardState, raw: str) -> list[Effect]:
    state.workplace_setup = choice(raw, YES_NO, Step.WORKPLACE_SETUP.value)
    _heard(state, Step.WORKPLACE_SETUP, state.workplace_setup)
    return _after_workplace_setup(state)


def _workplace_type(state: WizardState, raw: str) -> list[Effect]:
    state.workplace_type = choice(raw, WORKPLACES, Step.WORKPLACE_TYPE.value)
    _heard(state, Step.WORKPLACE_TYPE, state.workplace_type)
    return _go(state, Step.SUMMARY)


def _workplace_individual(state: WizardState, raw: str) -> list[Effect]:
    workplace = choice(raw, WORKPLACES, Step.WORKPLACE_INDIVIDUAL.value)
    _heard(state, Step.WORKPLACE_INDIVIDUAL, workplace, per_member=True)
    state.member(state.current_member).workplace = workplace
    return _next_member(state, Step.WORKPLACE_INDIVIDUAL, Step.SUMMARY)


def _candidate_recommendation(state: WizardState, raw: str) -> list[Effect]:
    answer = choice(raw, YES_NO, Step.CANDIDATE_RECOMMENDATION.value)
    _heard(state, Step.CANDIDATE_RECOMMENDATION, answer)
    if answer == "yes":
        return _go(state, Step.SHOW_CANDIDATES)
    return _go(state, Step.NONE)


_ANSWER_HANDLERS: dict[Step, Callable[[WizardState, str], list[Effect]]] = {
    Step.TEAM_SIZE: _team_size,
    Step.ROLE_TYPE: _role_type,
    Step.INDUSTRY: _industry,
    Step.INDIVIDUAL_ROLES: _individual_roles,
    Step.EXPERIENCE_SETUP: _experience_setup,
    Step.EXPERIENCE: _experience,
    Step.EXPERIENCE_INDIVIDUAL: _experience_individual,
    Step.DESCRIPTION: _description,
    Step.WORKPLACE_SETUP: _workplace_setup,
    Step.WORKPLACE_TYPE: _workplace_type,
    Step.WORKPLACE_INDIVIDUAL: _workplace_individual,
    Step.CANDIDATE_RECOMMENDATION: _candidate_recommendation,
}


# ── Summary ──────────────────────────────────────────────────

def _confirm(state: WizardState) -> list[Effect]:
    user_id = state.user_id or anonymous_user_id()
    save = SavePricingInfo(user_id=user_id, form_data=state.form_data())
    return [save] + _go(state, Step.CANDIDATE_RECOMMENDATION)


# Summary field → step to reopen. Team size and the branch choices
# (roleType, experienceSetup, workplaceSetup) are fixed once answered.
EDIT_TARGETS = {
    "industry": Step.INDUSTRY,
    "roles": Step.INDIVIDUAL_ROLES,
    "individualRoles": Step.INDIVIDUAL_ROLES,
    "experience": Step.EXPERIENCE,
    "experienceIndividual": Step.EXPERIENCE,
    "description": Step.DESCRIPTION,
    "workplace": Step.WORKPLACE_TYPE,
    "workplaceType": Step.WORKPLACE_TYPE,
    "workplaceIndividual": Step.WORKPLACE_TYPE,
}


def _edit(state: WizardState, field_name: str) -> list[Effect]:
    target = EDIT_TARGETS.get(field_name)
    if target is None:
        raise InvalidAnswer(Step.SUMMARY.value, f"{field_name} cannot be edited")
    if target == Step.EXPERIENCE and state.experience_setup == "no":
        target = Step.EXPERIENCE_INDIVIDUAL
    if target == Step.WORKPLACE_TYPE and state.workplace_setup == "no":
        target = Step.WORKPLACE_INDIVIDUAL
    if target in PER_MEMBER_STEPS:
        state.current_member = 1
    return _go(state, target)
