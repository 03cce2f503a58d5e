import json
import os

from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Read CORS_ORIGINS as a JSON list or a comma-separated string."""
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return None
    if raw.startswith("["):
        return json.loads(raw)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    max_resume_chars: int = 50000
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False

    # Semantic scorer used by the ranking engine
    semantic_scorer: str = "auto"  # "auto" | "gemini" | "skill_overlap"

    # Match cache
    match_cache_ttl_seconds: float = 60.0
    match_cache_max_entries: int = 200

    # Ranking engine
    ranking_top_n: int = 50
    ranking_corpus_limit: int = 500
    ranking_quality_floor: float = 0.6
    scorer_concurrency: int = 8
    scorer_timeout_seconds: float = 10.0
    source_timeout_seconds: float = 15.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
