"""Google Gemini API wrapper with error handling."""

import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


class LLMServiceError(RuntimeError):
    """The Gemini API could not be reached or returned no usable text."""


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


async def generate_text(prompt: str) -> str | None:
    """Send a prompt to Gemini and return the raw response text.

    Returns None when no API key is configured. Transport and API failures
    are raised as LLMServiceError.
    """
    client = get_client()
    if client is None:
        return None

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=settings.llm_temperature,
                max_output_tokens=settings.llm_max_output_tokens,
            ),
        )
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        raise LLMServiceError(f"Gemini API error: {e}") from e

    text = response.text
    if not text:
        raise LLMServiceError("Gemini returned an empty response")
    return text.strip()
