"""Answer data model for qaForum."""

from datetime import datetime
from typing import List
from pydantic import BaseModel, Field

CONTENT_MIN_LENGTH = 10


class Answer(BaseModel):
    """An answer to a question."""
    
    id: str = Field(..., description="Answer identifier")
    content: str = Field(..., description="Answer body")
    user_id: str = Field(..., description="Author of the answer")
    question_id: str = Field(..., description="Question being answered")
    likes: List[str] = Field(default_factory=list, description="Users who liked the answer (each at most once)")
    created_at: datetime = Field(..., description="Creation timestamp")
    
    class Config:
        frozen = True
