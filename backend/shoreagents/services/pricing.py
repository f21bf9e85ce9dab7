"""Pricing quote persistence.

A quote is written once per summary confirmation. There is no
deduplication and no retry: a second confirmation is a second quote.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from shoreagents.models.pricing_quote import PricingQuote
from shoreagents.schemas.pricing import SavePricingInfoRequest
from shoreagents.wizard.fields import anonymous_user_id

logger = logging.getLogger(__name__)


async def save_pricing_info(db: AsyncSession, body: SavePricingInfoRequest) -> PricingQuote:
    """Insert a PricingQuote row and flush it so the id is available."""
    quote = PricingQuote(
        user_id=body.user_id or anonymous_user_id(),
        team_size=body.team_size,
        role_type=body.role_type,
        roles=body.roles,
        experience=body.experience,
        industry=body.industry,
        workplace=body.workplace,
        description=body.description,
        form_data=dict(body.form_data),
    )
    db.add(quote)
    await db.flush()
    logger.info("Saved pricing quote %s for %s", quote.id, quote.user_id)
    return quote


def request_from_form_data(user_id: str, form_data: dict[str, str]) -> SavePricingInfoRequest:
    """Build a quote request from the wizard's flattened form data."""
    size = int(form_data.get("teamSize", "0") or 0)
    roles: list[str] = []
    for n in range(1, size + 1):
        role = form_data.get(f"member{n}Role")
        if role and role not in roles:
            roles.append(role)

    workplace = form_data.get("workplaceType")
    if workplace is None and form_data.get("workplaceSetup") == "no":
        workplace = "individual"

    return SavePricingInfoRequest(
        user_id=user_id,
        team_size=size or None,
        role_type=form_data.get("roleType"),
        roles=", ".join(roles) or None,
        experience=form_data.get("experience"),
        description=form_data.get("description"),
        industry=form_data.get("industry"),
        workplace=workplace,
        form_data=form_data,
    )


class DatabasePricingStore:
    """Pricing-info persistence used by the wizard runner."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, user_id: str, form_data: dict[str, str]) -> str:
        try:
            quote = await save_pricing_info(self.db, request_from_form_data(user_id, form_data))
        except Exception:
            await self.db.rollback()
            raise
        return quote.id
