from .interview import Interview, InterviewCreate
from .feedback import (
    CategoryName,
    CategoryScore,
    FeedbackAssessment,
    Feedback,
    TranscriptEntry,
    CreateFeedbackRequest
)
from .action_result import ActionResult, CreateInterviewResult, CreateFeedbackResult

__all__ = [
    "Interview",
    "InterviewCreate",
    "CategoryName",
    "CategoryScore",
    "FeedbackAssessment",
    "Feedback",
    "TranscriptEntry",
    "CreateFeedbackRequest",
    "ActionResult",
    "CreateInterviewResult",
    "CreateFeedbackResult"
]
