"""Ranking output: per-job scores, badges and compatibility breakdown."""

from pydantic import BaseModel, Field


class SemanticScore(BaseModel):
    """Result of one semantic scorer call for a (candidate, job) pair."""
    relevance: float = Field(ge=0.0, le=1.0)
    skill_matches: list[str] = []
    explanation: str = ""
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)


class CompatibilityFactors(BaseModel):
    """Reported alongside a match. Not part of the fused score."""
    skill_alignment: float = Field(default=0.0, ge=0.0, le=1.0)
    experience_match: float = Field(default=0.0, ge=0.0, le=1.0)
    location_fit: float = Field(default=1.0, ge=0.0, le=1.0)
    salary_match: float = Field(default=1.0, ge=0.0, le=1.0)
    industry_relevance: float = Field(default=0.5, ge=0.0, le=1.0)


class EnhancedJobMatch(BaseModel):
    job_id: str
    title: str = ""
    company: str = ""
    match_score: float = Field(ge=0.0, le=1.0)
    confidence_level: float = Field(default=0.5, ge=0.0, le=1.0)
    skill_matches: list[str] = []
    explanation: str = ""
    semantic_relevance: float = Field(ge=0.0, le=1.0)
    recency_score: float = Field(ge=0.0, le=1.0)
    liveness_score: float = Field(ge=0.0, le=1.0)
    personalization_score: float = Field(ge=0.0, le=1.0)
    final_score: float = Field(ge=0.0, le=1.0)
    trust_score: int = Field(ge=0, le=100)
    liveness_status: str = "unknown"
    is_verified_active: bool = False
    is_direct_from_company: bool = False
    compatibility_factors: CompatibilityFactors = CompatibilityFactors()
