"""ShoreAgents pricing wizard and lead-capture backend."""

__version__ = "0.1.0"
