"""Pydantic contracts for signal extraction and job ranking."""

from models.schemas.candidate_signals import (
    CandidateSignals,
    EducationEntry,
    PersonalInfo,
    Position,
)
from models.schemas.candidate_profile import CandidateProfile, MatchCriteria
from models.schemas.job_listing import JobListing
from models.schemas.job_match import CompatibilityFactors, EnhancedJobMatch, SemanticScore

__all__ = [
    "CandidateSignals",
    "EducationEntry",
    "PersonalInfo",
    "Position",
    "CandidateProfile",
    "MatchCriteria",
    "JobListing",
    "CompatibilityFactors",
    "EnhancedJobMatch",
    "SemanticScore",
]
