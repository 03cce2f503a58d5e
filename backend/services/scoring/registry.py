"""Lazy-loading registry of semantic scorers.

Global singletons, created and loaded on first use.
"""

import logging

from config import settings
from services.scoring.base import BaseSemanticScorer

logger = logging.getLogger(__name__)

_registry: dict[str, BaseSemanticScorer] = {}


def resolve_scorer_name(name: str | None = None) -> str:
    """Map the configured name to a concrete scorer.

    ``auto`` picks Gemini when an API key is configured and skill overlap
    otherwise.
    """
    name = name or settings.semantic_scorer
    if name == "auto":
        return "gemini" if settings.gemini_api_key else "skill_overlap"
    return name


def _create_scorer(name: str) -> BaseSemanticScorer:
    """Factory: create a scorer by name with deferred imports."""
    if name == "gemini":
        from services.scoring.gemini_scorer import GeminiSemanticScorer
        return GeminiSemanticScorer()
    elif name == "skill_overlap":
        from services.scoring.skill_overlap_scorer import SkillOverlapScorer
        return SkillOverlapScorer()
    else:
        raise ValueError(f"Unknown semantic scorer: {name}")


def get_scorer(name: str | None = None) -> BaseSemanticScorer:
    """Get a scorer by name, creating and loading it on first access."""
    resolved = resolve_scorer_name(name)
    if resolved not in _registry:
        _registry[resolved] = _create_scorer(resolved)
    scorer = _registry[resolved]
    scorer.ensure_loaded()
    return scorer


def clear() -> None:
    """Drop all scorers. Useful for testing."""
    _registry.clear()
