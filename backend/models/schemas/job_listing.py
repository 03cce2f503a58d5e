"""Job postings as read from storage or external aggregators."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class JobListing(BaseModel):
    """A job posting. Read-only input to the ranking engine.

    ``source`` names where the posting came from: ``platform``/``internal``
    for first-party postings, an ATS or board identifier otherwise.
    """
    id: str
    title: str
    company: str = ""
    skills: list[str] = []
    requirements: list[str] = []
    description: str = ""
    location: str | None = None
    industry: str | None = None
    experience_level: str | None = None
    work_type: Literal["remote", "hybrid", "onsite"] | None = None
    salary_min: int | None = None
    salary_max: int | None = None
    source: str = "platform"
    trust_score: int | None = Field(default=None, ge=0, le=100)
    liveness_status: Literal["active", "stale", "unknown"] | None = None
    last_liveness_check: datetime | None = None
    created_at: datetime | None = None
    posted_date: datetime | None = None
    application_count: int | None = None
