"""
Gemini text-completion client used by the resume and chat endpoints.
"""
import logging

from ..config import get_settings

logger = logging.getLogger(__name__)

# Lazy initialization of Gemini client
_genai_client = None


def get_genai_client():
    """Get the Gemini client, initializing lazily if needed."""
    global _genai_client
    if _genai_client is None:
        settings = get_settings()
        if not settings.gemini_api_key:
            logger.warning("GEMINI_API_KEY not set - resume analysis disabled")
            return None
        from google import genai
        _genai_client = genai.Client(api_key=settings.gemini_api_key)
        logger.info(f"Gemini client initialized: {settings.gemini_model}")
    return _genai_client


def first_candidate_text(response) -> str:
    """Text of the first part of the first candidate, or "" if the shape is unexpected."""
    try:
        text = response.candidates[0].content.parts[0].text
    except (AttributeError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


class GeminiModel:
    """
    Prompt in, free text out. Non-streaming, fixed temperature.
    """

    def __init__(self, client, model: str, temperature: float = 0.4):
        self.client = client
        self.model = model
        self.temperature = temperature

    async def generate(self, prompt: str) -> str:
        if self.client is None:
            raise ValueError("Gemini API not configured. Please set GEMINI_API_KEY.")

        from google.genai import types
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=self.temperature,
            ),
        )
        return first_candidate_text(response)


def get_model_client() -> GeminiModel:
    """FastAPI dependency for the configured Gemini model."""
    settings = get_settings()
    return GeminiModel(
        client=get_genai_client(),
        model=settings.gemini_model,
        temperature=settings.gemini_temperature,
    )
