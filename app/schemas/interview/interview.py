"""
Description:
Schemas for interview records stored in the `interviews` collection.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


class Interview(BaseModel):
    id: Optional[str] = None
    role: str = ""
    type: str = ""
    level: str = ""
    techstack: List[str] = Field(default_factory=list)
    questions: List[str] = Field(default_factory=list)
    userId: str
    finalized: bool = False
    createdAt: str
    coverImage: Optional[str] = None

    @field_validator("role", "type", "level", "techstack", "questions", "finalized", mode="before")
    @classmethod
    def null_to_default(cls, value, info):
        """Stored nulls read back as the field default."""
        if value is not None:
            return value
        return cls.model_fields[info.field_name].get_default(call_default_factory=True)


class InterviewCreate(BaseModel):
    """
    Partial interview record supplied by the caller. Ownership and creation
    time are always assigned by the server. Null fields are treated as unset.
    """
    role: Optional[str] = None
    type: Optional[str] = None
    level: Optional[str] = None
    techstack: Optional[List[str]] = None
    questions: Optional[List[str]] = None
    finalized: Optional[bool] = None
    coverImage: Optional[str] = None
