"""Candidate recommendations from the BPOC talent pool.

Scoring (0..1):
  0.60 × role overlap       Jaccard similarity of role / position words
  0.25 × experience fit     years inside the requested band = 1,
                            adjacent band = 0.5, otherwise 0
  0.15 × industry match     1 when no industry was requested

Candidates whose position shares no word with the requested role are
not returned at all.
"""

import logging
import re
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shoreagents.config import settings
from shoreagents.models.candidate import BpocCandidate
from shoreagents.schemas.candidate import Candidate
from shoreagents.utils.cache import cached
from shoreagents.wizard.fields import title_case

logger = logging.getLogger(__name__)

ROLE_WEIGHT = 0.60
EXPERIENCE_WEIGHT = 0.25
INDUSTRY_WEIGHT = 0.15

LEVELS = ("entry", "mid", "senior")

# Inclusive year bands; senior has no upper bound
EXPERIENCE_BANDS: dict[str, tuple[int, int | None]] = {
    "entry": (0, 2),
    "mid": (3, 5),
    "senior": (6, None),
}

_WORD_RE = re.compile(r"[a-z0-9]+")


def _words(text: str | None) -> set[str]:
    return set(_WORD_RE.findall((text or "").lower()))


def level_for_years(years: int | None) -> str | None:
    if years is None:
        return None
    for level, (low, high) in EXPERIENCE_BANDS.items():
        if years >= low and (high is None or years <= high):
            return level
    return None


def role_overlap(role: str, position: str | None) -> float:
    wanted, have = _words(role), _words(position)
    if not wanted or not have:
        return 0.0
    return len(wanted & have) / len(wanted | have)


def experience_fit(years: int | None, level: str) -> float:
    actual = level_for_years(years)
    if actual is None or level not in LEVELS:
        return 0.0
    distance = abs(LEVELS.index(actual) - LEVELS.index(level))
    if distance == 0:
        return 1.0
    if distance == 1:
        return 0.5
    return 0.0


def industry_fit(candidate_industry: str | None, industry: str | None) -> float:
    if not industry:
        return 1.0
    return 1.0 if _words(industry) & _words(candidate_industry) else 0.0


def score_candidate(candidate: dict[str, Any], role: str, level: str, industry: str | None = None) -> float:
    overlap = role_overlap(role, candidate.get("position"))
    if overlap == 0.0:
        return 0.0
    score = (
        ROLE_WEIGHT * overlap
        + EXPERIENCE_WEIGHT * experience_fit(candidate.get("experience_years"), level)
        + INDUSTRY_WEIGHT * industry_fit(candidate.get("industry"), industry)
    )
    return round(min(score, 1.0), 4)


def _experience_text(years: int | None) -> str:
    if years is None:
        return "Not provided"
    return "1 year" if years == 1 else f"{years} years"


def rank_candidates(
    pool: list[dict[str, Any]],
    role: str,
    level: str,
    industry: str | None = None,
    *,
    limit: int = 5,
    threshold: float = 0.7,
) -> list[Candidate]:
    """Best matches first; ties go to the higher BPOC overall score."""
    scored: list[tuple[float, float, Candidate]] = []
    for row in pool:
        score = score_candidate(row, role, level, industry)
        if score <= 0.0:
            continue
        scored.append((
            score,
            row.get("overall_score") or 0.0,
            Candidate(
                id=row["user_id"],
                name=title_case(row.get("full_name") or ""),
                position=row.get("position"),
                experience=_experience_text(row.get("experience_years")),
                skills=list(row.get("key_skills") or []),
                expected_salary=row.get("expected_salary"),
                match_score=score,
                is_recommended=score >= threshold,
            ),
        ))
    scored.sort(key=lambda item: (item[0], item[1]), reverse=True)
    return [candidate for _, _, candidate in scored[:limit]]


@cached(ttl=settings.candidate_cache_ttl, prefix="bpoc")
async def load_candidate_pool(db: AsyncSession) -> list[dict[str, Any]]:
    """All BPOC candidate profiles as plain dicts, highest score first."""
    result = await db.execute(
        select(BpocCandidate).order_by(BpocCandidate.overall_score.desc())
    )
    pool = [
        {
            "user_id": c.user_id,
            "full_name": c.full_name,
            "position": c.position,
            "overall_score": c.overall_score,
            "experience_years": c.experience_years,
            "key_skills": c.key_skills or [],
            "expected_salary": c.expected_salary,
            "industry": c.industry,
            "work_setup": c.work_setup,
        }
        for c in result.scalars().all()
    ]
    logger.info("Loaded %d candidates from BPOC", len(pool))
    return pool


class BpocRecommender:
    """Candidate recommender backed by the BPOC database."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def recommend(
        self,
        role: str,
        experience_level: str,
        industry: str | None = None,
    ) -> list[Candidate]:
        pool = await load_candidate_pool(self.db)
        return rank_candidates(
            pool,
            role,
            experience_level,
            industry,
            limit=settings.candidate_limit,
            threshold=settings.recommendation_threshold,
        )
