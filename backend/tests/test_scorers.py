"""Tests for the semantic scorers, the scorer registry and the Gemini wrapper."""

from types import SimpleNamespace

import pytest

from config import settings
from services import gemini_client
from services.exceptions import ScoringError
from services.scoring import gemini_scorer
from services.scoring.gemini_scorer import GeminiSemanticScorer
from services.scoring.registry import get_scorer, resolve_scorer_name
from services.scoring.skill_overlap_scorer import SkillOverlapScorer


def _fake_client(text: str | None = None, error: Exception | None = None):
    async def generate_content(**kwargs):
        if error is not None:
            raise error
        return SimpleNamespace(text=text)

    return SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))


class TestSkillOverlapScorer:
    def test_direct_overlap(self):
        result = SkillOverlapScorer().score_sync(
            "Skills: Python, Django",
            "Title: Backend Engineer\nSkills: Python, Django, AWS",
        )
        assert result.relevance == pytest.approx(2 / 3)
        assert result.skill_matches == ["Django", "Python"]
        assert result.confidence == 0.7
        assert "2 of 3" in result.explanation

    def test_related_skill_half_credit(self):
        result = SkillOverlapScorer().score_sync("Skills: Python", "Skills: Django")
        assert result.relevance == 0.5
        assert result.skill_matches == ["Django"]

    def test_no_overlap(self):
        result = SkillOverlapScorer().score_sync("Skills: Excel", "Skills: Kubernetes, Terraform")
        assert result.relevance == 0.0
        assert result.skill_matches == []

    def test_falls_back_to_text_similarity(self):
        result = SkillOverlapScorer().score_sync(
            "Community garden volunteer who loves roses",
            "Title: Gardener\nTending roses in the community garden",
        )
        assert 0.0 < result.relevance <= 1.0
        assert result.confidence == 0.3
        assert result.skill_matches == []
        assert "shared terms" in result.explanation
        assert "roses" in result.explanation

    def test_skill_lists_take_precedence_over_text(self):
        result = SkillOverlapScorer().score_sync(
            "Skills: Go, C",
            "Title: Systems Engineer\nSkills: Go, C",
            candidate_skills=["Go", "C"],
            job_skills=["Go", "C"],
        )
        assert result.relevance == 1.0
        assert result.skill_matches == ["C", "Go"]
        assert result.confidence == 0.7

    def test_listed_skills_ignore_negation_in_text(self):
        result = SkillOverlapScorer().score_sync(
            "Skills: Python. I have no experience with Django.",
            "Skills: Python, Django",
            candidate_skills=["Python", "Django"],
        )
        assert result.relevance == 1.0

    def test_empty_list_falls_back_to_text(self):
        result = SkillOverlapScorer().score_sync(
            "Skills: Python, Django",
            "Title: Backend Engineer",
            candidate_skills=[],
            job_skills=["python", "django", "aws"],
        )
        assert result.relevance == pytest.approx(2 / 3)
        assert result.skill_matches == ["Django", "Python"]

    def test_empty_texts(self):
        result = SkillOverlapScorer().score_sync("", "")
        assert result.relevance == 0.0

    @pytest.mark.asyncio
    async def test_async_score_matches_sync(self):
        scorer = SkillOverlapScorer()
        assert await scorer.score("Skills: Go", "Skills: Go") == scorer.score_sync("Skills: Go", "Skills: Go")


class TestGeminiScorer:
    @pytest.mark.asyncio
    async def test_without_client_uses_skill_overlap(self, monkeypatch):
        monkeypatch.setattr(gemini_scorer, "get_client", lambda: None)
        scorer = GeminiSemanticScorer()
        result = await scorer.score("Skills: Python", "Skills: Python")
        assert result.relevance == 1.0
        assert result.confidence == 0.7

    @pytest.mark.asyncio
    async def test_fallback_receives_skill_lists(self, monkeypatch):
        monkeypatch.setattr(gemini_scorer, "get_client", lambda: None)
        result = await GeminiSemanticScorer().score(
            "Summary only", "Title: Systems Engineer", candidate_skills=["Go", "C"], job_skills=["Go", "C"]
        )
        assert result.relevance == 1.0
        assert result.skill_matches == ["C", "Go"]

    @pytest.mark.asyncio
    async def test_parses_model_result(self, monkeypatch):
        async def fake_generate(prompt):
            assert "Skills: Python" in prompt
            return {"score": 82, "confidence_level": 0.9, "skill_matches": ["Python"], "explanation": "Good fit"}

        monkeypatch.setattr(gemini_scorer, "get_client", lambda: object())
        monkeypatch.setattr(gemini_scorer, "generate_json", fake_generate)

        result = await GeminiSemanticScorer().score("Skills: Python", "Skills: Python, AWS")
        assert result.relevance == pytest.approx(0.82)
        assert result.confidence == pytest.approx(0.9)
        assert result.skill_matches == ["Python"]
        assert result.explanation == "Good fit"

    @pytest.mark.parametrize("raw,expected", [(140, 1.0), (-5, 0.0), (None, 0.0)])
    def test_score_is_clamped(self, raw, expected):
        result = GeminiSemanticScorer()._parse_result({"score": raw, "confidence_level": 3})
        assert result.relevance == expected
        assert result.confidence == 1.0

    def test_missing_fields_get_defaults(self):
        result = GeminiSemanticScorer()._parse_result({"score": 50, "skill_matches": "Python"})
        assert result.skill_matches == []
        assert result.explanation == gemini_scorer.DEFAULT_EXPLANATION

    def test_malformed_score_raises(self):
        with pytest.raises(ScoringError):
            GeminiSemanticScorer()._parse_result({"score": "very good"})

    @pytest.mark.asyncio
    async def test_no_result_raises(self, monkeypatch):
        async def fake_generate(prompt):
            return None

        monkeypatch.setattr(gemini_scorer, "get_client", lambda: object())
        monkeypatch.setattr(gemini_scorer, "generate_json", fake_generate)

        with pytest.raises(ScoringError):
            await GeminiSemanticScorer().score("Skills: Python", "Skills: Python")


class TestRegistry:
    def test_auto_without_key_uses_skill_overlap(self, monkeypatch):
        monkeypatch.setattr(settings, "gemini_api_key", "")
        assert resolve_scorer_name("auto") == "skill_overlap"

    def test_auto_with_key_uses_gemini(self, monkeypatch):
        monkeypatch.setattr(settings, "gemini_api_key", "test-key")
        assert resolve_scorer_name("auto") == "gemini"

    def test_explicit_name_passes_through(self):
        assert resolve_scorer_name("skill_overlap") == "skill_overlap"

    def test_get_scorer_is_loaded_singleton(self):
        scorer = get_scorer("skill_overlap")
        assert isinstance(scorer, SkillOverlapScorer)
        assert scorer.is_loaded
        assert get_scorer("skill_overlap") is scorer

    def test_unknown_scorer(self):
        with pytest.raises(ValueError):
            get_scorer("crystal_ball")


class TestGeminiClient:
    def test_strip_code_fences(self):
        assert gemini_client._strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
        assert gemini_client._strip_code_fences('  {"a": 1} ') == '{"a": 1}'

    @pytest.mark.asyncio
    async def test_no_key_returns_none(self, monkeypatch):
        monkeypatch.setattr(settings, "gemini_api_key", "")
        assert await gemini_client.generate_json("prompt") is None

    @pytest.mark.asyncio
    async def test_parses_fenced_json(self, monkeypatch):
        monkeypatch.setattr(gemini_client, "get_client", lambda: _fake_client('```json\n{"score": 70}\n```'))
        assert await gemini_client.generate_json("prompt") == {"score": 70}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("client", [
        _fake_client("not json"),
        _fake_client(""),
        _fake_client(error=RuntimeError("quota exceeded")),
    ])
    async def test_failures_return_none(self, monkeypatch, client):
        monkeypatch.setattr(gemini_client, "get_client", lambda: client)
        assert await gemini_client.generate_json("prompt") is None
