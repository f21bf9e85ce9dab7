"""Quote persistence and job description generation.

These mirror the two endpoints the chat widget calls directly:
  POST /api/save-pricing-info
  POST /api/generate-job-description
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shoreagents.database import get_db
from shoreagents.schemas.pricing import (
    JobDescriptionRequest,
    JobDescriptionResponse,
    SavePricingInfoRequest,
    SavePricingInfoResponse,
)
from shoreagents.services.job_description import build_job_description
from shoreagents.services.pricing import save_pricing_info

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/save-pricing-info", response_model=SavePricingInfoResponse)
async def save_pricing(
    body: SavePricingInfoRequest,
    db: AsyncSession = Depends(get_db),
):
    quote = await save_pricing_info(db, body)
    return SavePricingInfoResponse(success=True, id=quote.id, user_id=quote.user_id)


@router.post("/generate-job-description", response_model=JobDescriptionResponse)
async def generate_job_description(body: JobDescriptionRequest):
    return JobDescriptionResponse(success=True, description=build_job_description(body))
