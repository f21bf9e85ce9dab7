"""Pricing wizard endpoints.

Endpoints:
  POST /api/wizard/start        → fresh wizard state
  POST /api/wizard/advance      → apply one event to a posted state
  POST /api/wizard/description  → AI-style job description proposal

Design:
  - The widget owns the state and posts it with every call; nothing is
    stored until the summary is confirmed.
  - Confirming the summary writes a PricingQuote; a failed write is
    logged and the wizard still moves on.
  - Rejected answers return 422 INVALID_ANSWER and the widget keeps the
    state it already has.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shoreagents.database import get_bpoc_db, get_db
from shoreagents.middleware.exceptions import InvalidAnswerError
from shoreagents.schemas.wizard import (
    DescriptionSuggestion,
    SummaryRow,
    WizardAdvance,
    WizardResponse,
    WizardStart,
    WizardStateOnly,
)
from shoreagents.services.candidates import BpocRecommender
from shoreagents.services.job_description import get_description_generator
from shoreagents.services.pricing import DatabasePricingStore
from shoreagents.wizard.machine import new_state
from shoreagents.wizard.prompts import summarize
from shoreagents.wizard.session import PricingWizard
from shoreagents.wizard.state import WizardState
from shoreagents.wizard.steps import Step

router = APIRouter()


# ── Helpers ──────────────────────────────────────────────────

def _make_wizard(state: WizardState, db: AsyncSession, bpoc_db: AsyncSession) -> PricingWizard:
    return PricingWizard(
        state,
        generator=get_description_generator(),
        recommender=BpocRecommender(bpoc_db),
        store=DatabasePricingStore(db),
    )


def _make_response(state: WizardState) -> WizardResponse:
    last = state.transcript[-1] if state.transcript else None
    prompt = last.content if last and last.role == "assistant" else None
    summary = None
    if state.current_step == Step.SUMMARY:
        summary = [SummaryRow(**row) for row in summarize(state)]
    return WizardResponse(state=state, prompt=prompt, summary=summary)


# ── POST /api/wizard/start ───────────────────────────────────

@router.post("/start", response_model=WizardResponse)
async def start_wizard(body: WizardStart | None = None):
    state = new_state(user_id=body.user_id if body else None)
    return _make_response(state)


# ── POST /api/wizard/advance ─────────────────────────────────

@router.post("/advance", response_model=WizardResponse)
async def advance_wizard(
    body: WizardAdvance,
    db: AsyncSession = Depends(get_db),
    bpoc_db: AsyncSession = Depends(get_bpoc_db),
):
    """Apply one answer / confirm / edit / close event."""
    wizard = _make_wizard(body.state, db, bpoc_db)
    if not await wizard.submit(body.event):
        err = wizard.last_error
        raise InvalidAnswerError(step=err.step, message=err.message)
    return _make_response(wizard.state)


# ── POST /api/wizard/description ─────────────────────────────

@router.post("/description", response_model=DescriptionSuggestion)
async def suggest_description(
    body: WizardStateOnly,
    db: AsyncSession = Depends(get_db),
    bpoc_db: AsyncSession = Depends(get_bpoc_db),
):
    """Propose a job description from the answers given so far."""
    wizard = _make_wizard(body.state, db, bpoc_db)
    return DescriptionSuggestion(description=await wizard.suggest_description())
