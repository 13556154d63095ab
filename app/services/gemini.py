import asyncio

from google import genai
from google.genai import types
from loguru import logger

from app.core.config import settings
from app.core.exceptions import QuestionGenerationError


class GeminiService:
    def __init__(self, model: str = settings.DEFAULT_GEMINI_MODEL):
        self.model = model
        self.client = None
        if api_key := settings.GEMINI_API_KEY:
            try:
                self.client = genai.Client(api_key=api_key)
            except Exception as e:
                logger.warning(f"Failed to initialize Gemini client: {e}")
        else:
            logger.warning("GEMINI_API_KEY not set. Question generation will fail until it is configured.")

    def generate_content(self, prompt: str) -> str:
        """Run a single prompt and return the raw text reply."""
        if not self.client:
            raise QuestionGenerationError("Gemini client not initialized")
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=settings.QUESTION_TEMPERATURE,
                    max_output_tokens=settings.QUESTION_MAX_OUTPUT_TOKENS,
                ),
            )
        except Exception as e:
            logger.exception(f"Error generating content with Gemini: {e}")
            raise QuestionGenerationError(str(e)) from e
        return (response.text or "").strip()

    async def generate_content_async(self, prompt: str) -> str:
        """Async wrapper to avoid blocking the event loop during network calls."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, lambda: self.generate_content(prompt))


gemini_service = GeminiService()
