"""Candidate recommendations and BPOC talent-pool listing."""

from typing import Literal

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shoreagents.database import get_bpoc_db
from shoreagents.schemas.candidate import BpocUsersResponse, Candidate
from shoreagents.services.candidates import BpocRecommender, load_candidate_pool

router = APIRouter()


@router.get("/candidates/recommendations", response_model=list[Candidate])
async def recommend_candidates(
    role: str = Query(..., min_length=1),
    experience_level: Literal["entry", "mid", "senior"] = Query("mid", alias="experienceLevel"),
    industry: str | None = None,
    bpoc_db: AsyncSession = Depends(get_bpoc_db),
):
    """Ranked candidates for a role, best match first. May be empty."""
    return await BpocRecommender(bpoc_db).recommend(role, experience_level, industry)


@router.get("/bpoc-users", response_model=BpocUsersResponse)
async def list_bpoc_users(bpoc_db: AsyncSession = Depends(get_bpoc_db)):
    """Full candidate pool (served from cache for up to 5 minutes)."""
    pool = await load_candidate_pool(bpoc_db)
    return BpocUsersResponse(success=True, data=pool, total=len(pool))
