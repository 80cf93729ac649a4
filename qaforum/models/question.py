"""Question data model for qaForum."""

from datetime import datetime
from typing import List
from pydantic import BaseModel, Field

TITLE_MIN_LENGTH = 10
CONTENT_MIN_LENGTH = 20


class Question(BaseModel):
    """A question asked by a user."""
    
    id: str = Field(..., description="Question identifier")
    title: str = Field(..., description="Question title")
    content: str = Field(..., description="Question body")
    slug: str = Field(..., description="Unique URL-safe form of the title")
    user_id: str = Field(..., description="Author of the question")
    likes: List[str] = Field(default_factory=list, description="Users who liked the question")
    # Recorded as user references, as in the stored schema.
    answers: List[str] = Field(default_factory=list, description="Answer references")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
    
    class Config:
        frozen = True
