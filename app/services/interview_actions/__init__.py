from .interview_actions import (
    create_interview,
    get_interview_by_id,
    get_latest_interviews,
    get_interviews_by_user_id,
    DEFAULT_LATEST_LIMIT
)
from .feedback_actions import create_feedback, get_feedback_by_interview_id

__all__ = [
    "create_interview",
    "get_interview_by_id",
    "get_latest_interviews",
    "get_interviews_by_user_id",
    "DEFAULT_LATEST_LIMIT",
    "create_feedback",
    "get_feedback_by_interview_id"
]
