from pydantic import BaseModel, Field

from config import settings
from models.schemas.candidate_profile import MatchCriteria
from models.schemas.job_listing import JobListing


class QuickSignalsRequest(BaseModel):
    resume_text: str = Field(
        ..., max_length=settings.max_resume_chars, description="Plain text resume content"
    )


class RankMatchesRequest(BaseModel):
    criteria: MatchCriteria
    jobs: list[JobListing] = Field(default_factory=list, max_length=500, description="Job corpus to rank")
    limit: int = Field(50, ge=1, le=50)
