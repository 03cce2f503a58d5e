"""Shared dependencies for API routes."""

from services.scoring.base import BaseSemanticScorer
from services.scoring.registry import get_scorer


def get_semantic_scorer() -> BaseSemanticScorer:
    return get_scorer()
