"""Runs the wizard against its collaborators.

PricingWizard applies events with `transition()` and carries out the
effects it returns. Collaborator failures never stop the flow:

  - saving the quote fails     → logged, wizard still moves on
  - fetching candidates fails  → empty recommendation list
  - generating a description   → short templated fallback text
"""

import logging
from typing import Protocol

from shoreagents.schemas.candidate import Candidate
from shoreagents.schemas.pricing import JobDescriptionRequest
from shoreagents.services.job_description import fallback_description
from shoreagents.wizard.events import Effect, FetchCandidates, SavePricingInfo, WizardEvent
from shoreagents.wizard.fields import InvalidAnswer
from shoreagents.wizard.machine import new_state, transition
from shoreagents.wizard.state import WizardState

logger = logging.getLogger(__name__)


class DescriptionGenerator(Protocol):
    async def generate(self, request: JobDescriptionRequest) -> str: ...


class CandidateRecommender(Protocol):
    async def recommend(
        self, role: str, experience_level: str, industry: str | None = None
    ) -> list[Candidate]: ...


class PricingStore(Protocol):
    async def save(self, user_id: str, form_data: dict[str, str]) -> str: ...


def description_request(state: WizardState) -> JobDescriptionRequest:
    """Generator input built from the answers collected so far."""
    experience = state.experience
    if experience is None:
        levels = {m.experience for m in state.members if m.experience}
        if len(levels) == 1:
            experience = levels.pop()
        elif levels:
            experience = "mixed"
    return JobDescriptionRequest(
        team_size=state.team_size,
        role_type=state.role_type,
        roles=", ".join(state.roles()) or None,
        experience=experience,
        industry=state.industry,
    )


class PricingWizard:
    def __init__(
        self,
        state: WizardState | None = None,
        *,
        generator: DescriptionGenerator,
        recommender: CandidateRecommender,
        store: PricingStore,
    ):
        self.state = state or new_state()
        self.generator = generator
        self.recommender = recommender
        self.store = store
        self.last_error: InvalidAnswer | None = None

    async def submit(self, event: WizardEvent) -> bool:
        """Apply one event. Returns False (state unchanged) if it was rejected."""
        try:
            result = transition(self.state, event)
        except InvalidAnswer as exc:
            logger.info("Rejected answer at %s: %s", exc.step, exc.message)
            self.last_error = exc
            return False

        self.last_error = None
        self.state = result.state
        for effect in result.effects:
            await self._run(effect)
        return True

    async def _run(self, effect: Effect) -> None:
        if isinstance(effect, SavePricingInfo):
            try:
                quote_id = await self.store.save(effect.user_id, effect.form_data)
                logger.info("Pricing info saved: %s", quote_id)
            except Exception:
                logger.exception("Error saving pricing information for %s", effect.user_id)

        elif isinstance(effect, FetchCandidates):
            try:
                candidates = await self.recommender.recommend(
                    effect.role, effect.experience_level, effect.industry
                )
            except Exception:
                logger.exception(
                    "Error fetching candidates for %s (%s)", effect.role, effect.experience_level
                )
                candidates = []
            self.state.candidate_recommendations = candidates

    async def suggest_description(self) -> str:
        """Job description proposal for the description step."""
        request = description_request(self.state)
        try:
            return await self.generator.generate(request)
        except Exception:
            logger.exception("Error generating job description")
            return fallback_description(request)
