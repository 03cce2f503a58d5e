"""Pure-feature semantic scorer: alias-resolved skill overlap.

Needs no network or model. Structured skill lists are used as given;
text is mined for skills only when a list is missing. When the posting
names no skill at all the score falls back to TF-IDF cosine similarity
of the two texts.
"""

import logging

from models.schemas.job_match import SemanticScore
from services.scoring.base import BaseSemanticScorer
from services.similarity import shared_terms, tfidf_cosine_similarity
from services.skill_extractor import compute_skill_overlap, extract_skill_names
from services.skill_taxonomy import normalize_skills

logger = logging.getLogger(__name__)

# Overlap is a direct signal; lexical similarity is a weak one
OVERLAP_CONFIDENCE = 0.7
TFIDF_CONFIDENCE = 0.3


class SkillOverlapScorer(BaseSemanticScorer):
    scorer_name = "skill_overlap"

    def load(self) -> None:
        # Stateless: the taxonomy is built at import time
        pass

    async def score(
        self,
        candidate_text: str,
        job_text: str,
        *,
        candidate_skills: list[str] | None = None,
        job_skills: list[str] | None = None,
    ) -> SemanticScore:
        return self.score_sync(
            candidate_text, job_text,
            candidate_skills=candidate_skills, job_skills=job_skills,
        )

    def score_sync(
        self,
        candidate_text: str,
        job_text: str,
        *,
        candidate_skills: list[str] | None = None,
        job_skills: list[str] | None = None,
    ) -> SemanticScore:
        wanted = _skill_set(job_skills, job_text)

        if not wanted:
            relevance = tfidf_cosine_similarity(candidate_text, job_text)
            terms = shared_terms(candidate_text, job_text)
            explanation = "No known skills named in the posting; scored on text similarity"
            if terms:
                explanation += f" (shared terms: {', '.join(terms)})"
            return SemanticScore(
                relevance=relevance,
                skill_matches=[],
                explanation=explanation,
                confidence=TFIDF_CONFIDENCE,
            )

        have = _skill_set(candidate_skills, candidate_text)
        relevance, matched = compute_skill_overlap(have, wanted)
        explanation = f"Covers {len(matched)} of {len(wanted)} skills in the posting"
        if matched:
            explanation += f": {', '.join(matched[:5])}"

        return SemanticScore(
            relevance=relevance,
            skill_matches=matched,
            explanation=explanation,
            confidence=OVERLAP_CONFIDENCE,
        )


def _skill_set(skills: list[str] | None, text: str) -> set[str]:
    """Canonical skills from a structured list, mined from ``text`` when the list is empty.

    Listed skills are trusted as written: no negation or context checks.
    """
    listed = normalize_skills(skills or [])
    if listed:
        return set(listed)
    return extract_skill_names(text)
