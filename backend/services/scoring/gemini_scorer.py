"""Gemini-backed semantic scorer.

Asks Gemini for a 0-100 match score and converts it to relevance in
[0, 1]. Without an API key it degrades to skill-overlap scoring.
"""

import logging

from models.schemas.job_match import SemanticScore
from services.exceptions import ScoringError
from services.gemini_client import generate_json, get_client
from services.prompt_builder import build_match_prompt
from services.scoring.base import BaseSemanticScorer
from services.scoring.skill_overlap_scorer import SkillOverlapScorer

logger = logging.getLogger(__name__)

DEFAULT_EXPLANATION = "Match assessed from profile and posting compatibility"


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class GeminiSemanticScorer(BaseSemanticScorer):
    scorer_name = "gemini"

    def __init__(self) -> None:
        self._use_fallback = False
        self._fallback = SkillOverlapScorer()

    def load(self) -> None:
        if get_client() is None:
            logger.warning("Gemini unavailable, semantic scores will use skill overlap")
            self._use_fallback = True
            self._fallback.ensure_loaded()

    async def score(
        self,
        candidate_text: str,
        job_text: str,
        *,
        candidate_skills: list[str] | None = None,
        job_skills: list[str] | None = None,
    ) -> SemanticScore:
        self.ensure_loaded()
        if self._use_fallback:
            return await self._fallback.score(
                candidate_text, job_text,
                candidate_skills=candidate_skills, job_skills=job_skills,
            )

        # The prompt texts already list both skill sets
        result = await generate_json(build_match_prompt(candidate_text, job_text))
        if result is None:
            raise ScoringError("Gemini returned no usable match result")
        return self._parse_result(result)

    def _parse_result(self, result: dict) -> SemanticScore:
        try:
            raw_score = float(result.get("score", 0) or 0)
            raw_confidence = float(result.get("confidence_level", 0) or 0)
        except (TypeError, ValueError) as e:
            raise ScoringError(f"Malformed Gemini match result: {e}") from e

        skill_matches = result.get("skill_matches") or []
        if not isinstance(skill_matches, list):
            skill_matches = []

        return SemanticScore(
            relevance=_clamp(raw_score, 0.0, 100.0) / 100,
            skill_matches=[str(s) for s in skill_matches],
            explanation=str(result.get("explanation") or DEFAULT_EXPLANATION),
            confidence=_clamp(raw_confidence, 0.0, 1.0),
        )
