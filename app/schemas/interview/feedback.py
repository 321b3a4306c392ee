"""
Description:
Schemas for interview feedback: the structured assessment requested from the
generation endpoint, the record stored in the `feedback` collection, and the
transcript entries the assessment is built from.

List-shaped assessment fields are normalized when the model response is
validated, so a newline-delimited string becomes a list of non-empty lines.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.
- app.helper.coerce_string_list: For string-or-list normalization.
- app.constants.feedback_prompts: For the fixed category names.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional, Union
from app.helper.coerce_string_list import coerce_string_list

CategoryName = Literal[
    "Communication Skills",
    "Technical Knowledge",
    "Problem Solving",
    "Cultural Fit",
    "Confidence and Clarity",
]


class CategoryScore(BaseModel):
    name: CategoryName
    score: Union[int, float] = Field(..., description="Score for this category")
    comment: str = Field(default="", description="Reasoning behind the score")


class FeedbackAssessment(BaseModel):
    totalScore: Union[int, float] = Field(..., description="Overall interview score")
    categoryScores: List[CategoryScore] = Field(..., description="One score per evaluation category")
    strengths: List[str] = Field(default_factory=list, description="Strengths of the candidate")
    areasForImprovement: List[str] = Field(default_factory=list, description="Areas the candidate should improve")
    finalAssessment: str = Field(default="", description="Narrative summary of the interview")

    @field_validator("strengths", "areasForImprovement", mode="before")
    @classmethod
    def split_delimited_string(cls, value):
        try:
            return coerce_string_list(value)
        except TypeError as e:
            raise ValueError(str(e)) from e

    @field_validator("categoryScores")
    @classmethod
    def unique_category_names(cls, value: List[CategoryScore]) -> List[CategoryScore]:
        names = [category.name for category in value]
        if len(names) != len(set(names)):
            raise ValueError("categoryScores must not repeat a category")
        return value


class Feedback(FeedbackAssessment):
    id: Optional[str] = None
    interviewId: str
    userId: str
    createdAt: str


class TranscriptEntry(BaseModel):
    role: str
    content: str


class CreateFeedbackRequest(BaseModel):
    interviewId: str
    userId: str
    transcript: List[TranscriptEntry]
    feedbackId: Optional[str] = None
