import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shoreagents import __version__
from shoreagents.config import settings
from shoreagents.database import bpoc_engine, engine
from shoreagents.middleware.exceptions import register_exception_handlers
from shoreagents.middleware.rate_limit import RateLimitMiddleware
from shoreagents.routers import autocomplete, candidates, health, pricing, wizard
from shoreagents.utils.cache import close_redis

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("shoreagents")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("ShoreAgents API starting (%s)", settings.environment)
    yield
    await close_redis()
    await engine.dispose()
    await bpoc_engine.dispose()
    logger.info("ShoreAgents API stopped")


app = FastAPI(
    title="ShoreAgents",
    description="Pricing wizard and lead capture for offshore team hiring",
    version=__version__,
    lifespan=lifespan,
)

# ── Exception Handlers ───────────────────────────────────────
register_exception_handlers(app)

# ── Middleware (last added runs outermost) ──────────────────
if settings.rate_limit_enabled:
    app.add_middleware(
        RateLimitMiddleware,
        default_limit=120,
        default_window=60,
        exempt_paths=["/health", "/docs", "/openapi.json"],
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ──────────────────────────────────────────────────
app.include_router(health.router)
app.include_router(wizard.router, prefix="/api/wizard", tags=["wizard"])
app.include_router(pricing.router, prefix="/api", tags=["pricing"])
app.include_router(candidates.router, prefix="/api", tags=["candidates"])
app.include_router(autocomplete.router, prefix="/api", tags=["autocomplete"])
