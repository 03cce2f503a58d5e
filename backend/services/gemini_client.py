"""Async Google Gemini wrapper for JSON-returning prompts."""

import json
import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

MATCH_TEMPERATURE = 0.3
MATCH_MAX_OUTPUT_TOKENS = 1024

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    """Shared client, or None when no API key is configured."""
    global _client
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY not set, Gemini scoring disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def _strip_code_fences(text: str) -> str:
    # Models sometimes wrap JSON in ```json fences despite the mime type
    text = text.strip()
    if not text.startswith("```"):
        return text
    body = text.split("\n", 1)[1] if "\n" in text else text[3:]
    return body.removesuffix("```").strip()


def _json_config() -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        temperature=MATCH_TEMPERATURE,
        max_output_tokens=MATCH_MAX_OUTPUT_TOKENS,
        response_mime_type="application/json",
    )


async def generate_json(prompt: str) -> dict | None:
    """Run ``prompt`` on the configured model and decode the JSON reply.

    Returns None when Gemini is not configured, the call fails, or the reply
    is empty or not JSON. Callers decide whether that is fatal.
    """
    client = get_client()
    if client is None:
        return None

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=_json_config(),
        )
    except Exception as e:
        logger.error("Gemini request failed: %s", e)
        return None

    if not response.text:
        logger.error("Gemini returned an empty response")
        return None

    try:
        parsed = json.loads(_strip_code_fences(response.text))
    except json.JSONDecodeError as e:
        logger.error("Gemini reply is not valid JSON: %s", e)
        return None

    if not isinstance(parsed, dict):
        logger.error("Gemini reply is JSON but not an object: %s", type(parsed).__name__)
        return None
    return parsed
