"""Answer validation and display formatting for wizard fields.

Every validator takes the raw text the user typed (or the value of the
button they clicked) and returns the normalised value to store, or raises
InvalidAnswer. Nothing here touches wizard state.
"""

import re
import time

from shoreagents.config import settings

NOT_PROVIDED = "Not provided"

_TEAM_SIZE_RE = re.compile(r"^\d+$")


class InvalidAnswer(ValueError):
    """Raised when an answer cannot be accepted for the active step."""

    def __init__(self, step: str, message: str):
        self.step = step
        self.message = message
        super().__init__(message)


def parse_team_size(raw: str) -> int:
    """Accept an all-digit team size between 1 and settings.max_team_size."""
    value = (raw or "").strip()
    if not _TEAM_SIZE_RE.match(value):
        raise InvalidAnswer("teamSize", "Team size must be a whole number")
    size = int(value)
    if size < 1:
        raise InvalidAnswer("teamSize", "Team size must be at least 1")
    if size > settings.max_team_size:
        raise InvalidAnswer("teamSize", f"Team size can be at most {settings.max_team_size}")
    return size


def require_text(raw: str, step: str) -> str:
    value = (raw or "").strip()
    if not value:
        raise InvalidAnswer(step, "This answer is required")
    return value


def optional_text(raw: str) -> str:
    """Empty optional answers are stored as the literal "Not provided"."""
    value = (raw or "").strip()
    return value or NOT_PROVIDED


def choice(raw: str, allowed: tuple[str, ...], step: str) -> str:
    value = (raw or "").strip().lower()
    if value not in allowed:
        raise InvalidAnswer(step, f"Choose one of: {', '.join(allowed)}")
    return value


def title_case(text: str) -> str:
    """Upper-case the first letter of each whitespace-separated token.

    >>> title_case("mARIA dela cruz")
    'Maria Dela Cruz'
    """
    return " ".join(token[:1].upper() + token[1:].lower() for token in (text or "").split())


def anonymous_user_id() -> str:
    """Stand-in user id for visitors who are not signed in."""
    return f"anonymous_{int(time.time() * 1000)}"
