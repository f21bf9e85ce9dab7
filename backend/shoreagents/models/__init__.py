"""Aggregate model imports for Alembic auto-detection."""

# ShoreAgents database
from shoreagents.models.pricing_quote import PricingQuote  # noqa: F401

# BPOC database (read-only)
from shoreagents.models.candidate import BpocCandidate  # noqa: F401
