"""Confirmed pricing-wizard submissions.

One row per summary confirmation. Submissions are not deduplicated:
confirming the same wizard twice stores two quotes.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shoreagents.database import Base


class PricingQuote(Base):
    __tablename__ = "pricing_quotes"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    # Either an authenticated user id or anonymous_<epoch millis>
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    team_size: Mapped[int | None] = mapped_column(Integer)
    role_type: Mapped[str | None] = mapped_column(String(20))
    roles: Mapped[str | None] = mapped_column(Text)
    experience: Mapped[str | None] = mapped_column(String(20))
    industry: Mapped[str | None] = mapped_column(String(255))
    workplace: Mapped[str | None] = mapped_column(String(50))
    description: Mapped[str | None] = mapped_column(Text)

    # Full flattened wizard form data (member{N}Role etc.)
    form_data: Mapped[dict] = mapped_column(JSON, default=dict)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
