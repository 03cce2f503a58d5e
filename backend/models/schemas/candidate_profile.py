"""Stored candidate profile and the ranking criteria derived from it."""

from pydantic import BaseModel


class CandidateProfile(BaseModel):
    id: str
    skills: list[str] = []
    experience_level: str = "mid"
    location: str | None = None
    work_type: str | None = None
    industry: str | None = None
    salary_expectation: int | None = None
    summary: str = ""


class MatchCriteria(BaseModel):
    """Inputs the ranking engine scores jobs against.

    ``experience`` holds a seniority level name (entry, mid, senior, ...).
    """
    candidate_id: str
    skills: list[str] = []
    experience: str = "mid"
    location: str | None = None
    salary_expectation: int | None = None
    work_type: str | None = None
    industry: str | None = None
    summary: str = ""

    @classmethod
    def from_profile(cls, profile: CandidateProfile) -> "MatchCriteria":
        return cls(
            candidate_id=profile.id,
            skills=profile.skills,
            experience=profile.experience_level,
            location=profile.location,
            salary_expectation=profile.salary_expectation,
            work_type=profile.work_type,
            industry=profile.industry,
            summary=profile.summary,
        )
