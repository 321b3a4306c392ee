"""
Feedback Generation Service

This service turns a mock-interview transcript into a structured assessment.
The transcript is flattened into a plain-text block, one line per entry, and
submitted with a fixed system instruction to the hosted generation endpoint.
The request is constrained by the FeedbackAssessment JSON schema and the reply
is validated against the same model.

Dependencies:
- openai: For calls to the OpenAI-compatible Gemini endpoint
- pydantic: For validating the structured response
- loguru: For logging operations
- app.constants.feedback_prompts: For the fixed prompt text
"""

from typing import Iterable, get_args

from loguru import logger
from openai import AsyncOpenAI
from pydantic import ValidationError

from app.constants.feedback_prompts import FEEDBACK_PROMPT_TEMPLATE, FEEDBACK_SYSTEM_INSTRUCTION
from app.core.config import DEFAULT_FEEDBACK_MODEL
from app.errors.exceptions import FeedbackGenerationError
from app.schemas.interview import CategoryName, FeedbackAssessment, TranscriptEntry


def format_transcript(transcript: Iterable[TranscriptEntry]) -> str:
    """Render transcript entries as `- role: content` lines, in input order."""
    return "".join(f"- {entry.role}: {entry.content}\n" for entry in transcript)


def build_feedback_prompt(transcript: Iterable[TranscriptEntry]) -> str:
    categories = "\n".join(f"- {name}" for name in get_args(CategoryName))
    return FEEDBACK_PROMPT_TEMPLATE.format(categories=categories, transcript=format_transcript(transcript))


class FeedbackGenerationService:
    """
    Requests structured interview feedback from the hosted model.
    """

    def __init__(self, client: AsyncOpenAI, model: str = DEFAULT_FEEDBACK_MODEL):
        """
        Args:
            client: AsyncOpenAI client configured for the generation endpoint.
            model: Model identifier used for every request.
        """
        self.client = client
        self.model = model

    async def generate(self, prompt: str, system: str = FEEDBACK_SYSTEM_INSTRUCTION) -> FeedbackAssessment:
        """
        Generate an assessment for the given prompt.

        Args:
            prompt: User prompt containing the formatted transcript
            system: System instruction sent ahead of the prompt

        Returns:
            FeedbackAssessment: Validated, normalized assessment

        Raises:
            FeedbackGenerationError: If the model returns no content or content
                that does not satisfy the schema
        """
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt}
            ],
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": "interview_feedback",
                    "schema": FeedbackAssessment.model_json_schema()
                }
            }
        )

        content = response.choices[0].message.content
        if not content:
            raise FeedbackGenerationError("Empty response received from generation endpoint")

        try:
            assessment = FeedbackAssessment.model_validate_json(content)
        except ValidationError as e:
            logger.error(f"Generated feedback did not match schema: {e}")
            logger.debug(f"Content that failed to validate: {content[:500]}")
            raise FeedbackGenerationError("Generated feedback did not match the expected schema") from e

        logger.info(f"Generated feedback with total score {assessment.totalScore}")
        return assessment

    async def assess_transcript(self, transcript: Iterable[TranscriptEntry]) -> FeedbackAssessment:
        return await self.generate(build_feedback_prompt(transcript))
