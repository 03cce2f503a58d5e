"""Structured candidate profile extracted from resume text."""

from typing import Literal

from pydantic import BaseModel, Field

ExperienceLevel = Literal["entry", "mid", "senior", "executive"]


class Position(BaseModel):
    """A single job history entry."""
    title: str = "Unknown Role"
    company: str = ""
    duration: str = ""
    responsibilities: list[str] = []


class EducationEntry(BaseModel):
    degree: str
    institution: str = ""
    year: str | None = None


class PersonalInfo(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    github: str | None = None
    website: str | None = None


class CandidateSignals(BaseModel):
    """Output of ``extract_candidate_signals``.

    ``technical`` is ordered by descending rank: explicit mentions first,
    then inferred skills.
    """
    technical: list[str] = Field(default_factory=list, max_length=25)
    tools: list[str] = Field(default_factory=list, max_length=15)
    soft: list[str] = Field(default_factory=list, max_length=8)
    experience_level: ExperienceLevel = "mid"
    total_years: float = Field(default=0.0, ge=0)
    positions: list[Position] = []
    education: list[EducationEntry] = []
    certifications: list[str] = []
    personal_info: PersonalInfo = PersonalInfo()
    confidence: int = Field(default=0, ge=0, le=95)
