"""
AI Client Manager

This module manages the AsyncOpenAI client used to reach the hosted generation
endpoint. Gemini is called through its OpenAI-compatible API, so the same SDK
serves both. The manager is constructed during application startup and closed
on shutdown; routes receive the client through dependency injection.
"""

from typing import Optional

from loguru import logger
from openai import AsyncOpenAI

from app.core.config import DEFAULT_GEMINI_BASE_URL, DEFAULT_FEEDBACK_MODEL


class AIClientManager:
    """
    Owns the generation client and the model it targets.

    Attributes:
        model (str): Model identifier sent with every generation request
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_GEMINI_BASE_URL, model: str = DEFAULT_FEEDBACK_MODEL):
        if not api_key:
            raise RuntimeError(
                "GOOGLE_GENERATIVE_AI_API_KEY environment variable is not set. "
                "Please set it in your .env file or environment variables."
            )
        self.model = model
        self._client: Optional[AsyncOpenAI] = AsyncOpenAI(base_url=base_url, api_key=api_key)
        logger.info(f"Initialized generation client for model {model}")

    def get_feedback_client(self) -> AsyncOpenAI:
        """Get the client used for feedback generation."""
        if self._client is None:
            raise RuntimeError("Generation client has been closed")
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
            logger.info("Generation client closed")
