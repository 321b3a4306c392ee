"""
Description:
Envelopes returned by the interview and feedback actions. Members that do not
apply to an outcome are left unset and omitted when serialized.

Dependencies:
- pydantic: For data validation and settings management.
"""
from pydantic import BaseModel
from typing import Optional


class ActionResult(BaseModel):
    success: bool
    error: Optional[str] = None

    @classmethod
    def failure(cls, error: str):
        return cls(success=False, error=error)


class CreateInterviewResult(ActionResult):
    id: Optional[str] = None


class CreateFeedbackResult(ActionResult):
    feedbackId: Optional[str] = None
