"""BPOC candidate profile, mapped onto the `v_user_complete_data` view.

The view is owned by the BPOC platform; this service only reads it.
"""

from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from shoreagents.database import BpocBase


class BpocCandidate(BpocBase):
    __tablename__ = "v_user_complete_data"

    user_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[str | None] = mapped_column(String(255))
    # 0-100 composite score computed by BPOC assessments
    overall_score: Mapped[float | None] = mapped_column(Float)
    experience_years: Mapped[int | None] = mapped_column(Integer)
    key_skills: Mapped[list | None] = mapped_column(JSON, default=None)
    expected_salary: Mapped[str | None] = mapped_column(String(100))
    industry: Mapped[str | None] = mapped_column(String(255))
    work_setup: Mapped[str | None] = mapped_column(String(50))
    created_at: Mapped[datetime | None] = mapped_column(DateTime)
