"""Management CLI.

Usage:
    python -m shoreagents.cli check-bpoc      # Verify the BPOC connection and candidate view
    python -m shoreagents.cli list-quotes     # Show the most recent pricing quotes
    python -m shoreagents.cli clear-cache     # Drop the cached BPOC candidate pool
"""

import asyncio
import re
import sys

from sqlalchemy import create_engine, func, select, text

from shoreagents.config import settings
from shoreagents.models.candidate import BpocCandidate
from shoreagents.models.pricing_quote import PricingQuote
from shoreagents.utils.cache import close_redis, invalidate_cache


def _masked(url: str) -> str:
    return re.sub(r":[^:@/]+@", ":****@", url)


def check_bpoc() -> bool:
    print(f"Connecting to {_masked(settings.bpoc_database_url_sync)}")
    engine = create_engine(settings.bpoc_database_url_sync)
    try:
        with engine.connect() as conn:
            now = conn.execute(text("SELECT NOW()")).scalar()
            print(f"  Connected. Server time: {now}")

            total = conn.execute(select(func.count()).select_from(BpocCandidate)).scalar()
            print(f"  {total} candidate(s) in {BpocCandidate.__tablename__}")

            top = conn.execute(
                select(BpocCandidate.full_name, BpocCandidate.position, BpocCandidate.overall_score)
                .order_by(BpocCandidate.overall_score.desc())
                .limit(1)
            ).first()
            if top:
                print(f"  Top candidate: {top.full_name} ({top.position or 'Not specified'}), score {top.overall_score or 'N/A'}")
    except Exception as e:
        print(f"  FAILED: {e}")
        return False
    finally:
        engine.dispose()
    return True


def list_quotes(limit: int = 20):
    engine = create_engine(settings.database_url_sync)
    with engine.connect() as conn:
        rows = conn.execute(
            select(
                PricingQuote.created_at,
                PricingQuote.user_id,
                PricingQuote.team_size,
                PricingQuote.roles,
            )
            .order_by(PricingQuote.created_at.desc()).limit(limit)
        ).all()
    engine.dispose()
    for q in rows:
        print(f"  {q.created_at:%Y-%m-%d %H:%M}  {q.user_id:<28} team={q.team_size}  {q.roles or '-'}")
    print(f"\n{len(rows)} quote(s)")


async def _clear_cache() -> int:
    try:
        return await invalidate_cache("bpoc:*")
    finally:
        await close_redis()


def clear_cache():
    removed = asyncio.run(_clear_cache())
    print(f"Removed {removed} cached key(s)")


if __name__ == "__main__":
    cmd = sys.argv[1] if len(sys.argv) > 1 else ""
    if cmd == "check-bpoc":
        sys.exit(0 if check_bpoc() else 1)
    elif cmd == "list-quotes":
        list_quotes()
    elif cmd == "clear-cache":
        clear_cache()
    else:
        print(__doc__)
        sys.exit(1)
