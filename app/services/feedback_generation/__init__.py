"""
Feedback Generation Service Module

This module provides structured interview feedback generation backed by the
hosted large-language-model endpoint.
"""

from .feedback_generation_service import FeedbackGenerationService, format_transcript, build_feedback_prompt

__all__ = ["FeedbackGenerationService", "format_transcript", "build_feedback_prompt"]
