"""Deterministic resume -> CandidateSignals extraction.

No model or network calls: segmentation, alias lookup, cluster and graph
inference, and regex extractors only. Extraction is best effort and never
raises; unusable input yields an empty profile.
"""

import logging

from models.schemas.candidate_signals import (
    CandidateSignals,
    EducationEntry,
    PersonalInfo,
    Position,
)
from services.section_parser import (
    extract_certifications,
    extract_education,
    extract_experience,
    extract_personal_info,
    segment_sections,
)
from services.skill_extractor import (
    cap_with_parents,
    classify_skills,
    expand_stack_clusters,
    extract_skill_candidates,
    extract_soft_skills,
    infer_parent_skills,
)

logger = logging.getLogger(__name__)

MAX_TECHNICAL = 25
MAX_TOOLS = 15
MAX_SOFT = 8
MAX_CONFIDENCE = 95


def compute_confidence(technical: list[str], total_years: float, personal_info: PersonalInfo) -> int:
    """Additive confidence in the extraction, capped below 100."""
    score = 0
    if len(technical) >= 5:
        score += 40
    elif len(technical) >= 2:
        score += 20
    elif len(technical) >= 1:
        score += 10
    if total_years > 0:
        score += 15
    if personal_info.email:
        score += 15
    if personal_info.name:
        score += 15
    if personal_info.linkedin or personal_info.github:
        score += 15
    return min(score, MAX_CONFIDENCE)


def _build_signals(text: str) -> CandidateSignals:
    segments = segment_sections(text)

    candidates = extract_skill_candidates(segments)
    expand_stack_clusters(text, candidates)
    infer_parent_skills(candidates)
    technical, tools = classify_skills(candidates)
    technical = cap_with_parents(technical, MAX_TECHNICAL)

    experience = extract_experience(text, segments)
    personal_info = PersonalInfo(**extract_personal_info(text))

    return CandidateSignals(
        technical=technical,
        tools=tools[:MAX_TOOLS],
        soft=extract_soft_skills(text)[:MAX_SOFT],
        experience_level=experience.level,
        total_years=experience.total_years,
        positions=[Position(**p) for p in experience.positions],
        education=[EducationEntry(**e) for e in extract_education(segments)],
        certifications=extract_certifications(text),
        personal_info=personal_info,
        confidence=compute_confidence(technical, experience.total_years, personal_info),
    )


def extract_candidate_signals(resume_text: str) -> CandidateSignals:
    """Extract a typed candidate profile from free-text resume content.

    Non-string input is treated as empty text. Any unexpected failure is
    logged and an empty profile is returned instead of raising.
    """
    if not isinstance(resume_text, str):
        resume_text = ""
    text = resume_text.replace("\r\n", "\n").replace("\r", "\n")

    try:
        signals = _build_signals(text)
    except Exception:
        logger.exception("Signal extraction failed, returning empty profile")
        return CandidateSignals()

    logger.info(
        "Extracted %d technical / %d tool skills (confidence %d)",
        len(signals.technical), len(signals.tools), signals.confidence,
    )
    return signals
