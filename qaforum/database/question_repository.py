"""Repository for Question database operations."""

import logging
from datetime import datetime
from typing import Optional
from pymongo import ReturnDocument
from pymongo.database import Database

from qaforum.database.database import QUESTIONS, to_object_id
from qaforum.models.question import Question

logger = logging.getLogger(__name__)


def question_from_document(doc: dict) -> Question:
    return Question(
        id=str(doc["_id"]),
        title=doc["title"],
        content=doc["content"],
        slug=doc["slug"],
        user_id=str(doc["user_id"]),
        likes=[str(v) for v in doc.get("likes", [])],
        answers=[str(v) for v in doc.get("answers", [])],
        created_at=doc["created_at"],
        updated_at=doc.get("updated_at", doc["created_at"]),
    )


class QuestionRepository:
    """Repository for Question database operations."""
    
    def __init__(self, db: Database):
        self.collection = db[QUESTIONS]
    
    def create(self, *, title: str, content: str, slug: str, user_id: str) -> Question:
        """Insert a new question."""
        now = datetime.utcnow()
        doc = {
            "title": title,
            "content": content,
            "slug": slug,
            "user_id": to_object_id(user_id),
            "likes": [],
            "answers": [],
            "created_at": now,
            "updated_at": now,
        }
        try:
            result = self.collection.insert_one(doc)
        except Exception as e:
            logger.error(f"Failed to create question {slug}: {type(e).__name__}: {str(e)}")
            raise
        doc["_id"] = result.inserted_id
        logger.debug(f"Created question {result.inserted_id}: {title[:50]}")
        return question_from_document(doc)
    
    def get(self, question_id: str) -> Optional[Question]:
        """Get question by ID."""
        doc = self.collection.find_one({"_id": to_object_id(question_id)})
        return question_from_document(doc) if doc else None
    
    def slug_exists(self, slug: str) -> bool:
        return self.collection.find_one({"slug": slug}, {"_id": 1}) is not None
    
    def update(self, question_id: str, *, title: str, content: str) -> Optional[Question]:
        """Replace title and content. Returns None if the question is gone."""
        try:
            doc = self.collection.find_one_and_update(
                {"_id": to_object_id(question_id)},
                {"$set": {"title": title, "content": content, "updated_at": datetime.utcnow()}},
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            logger.error(f"Failed to update question {question_id}: {type(e).__name__}: {str(e)}")
            raise
        return question_from_document(doc) if doc else None
    
    def delete(self, question_id: str) -> bool:
        """Delete a question. Returns True if a document was removed."""
        try:
            result = self.collection.delete_one({"_id": to_object_id(question_id)})
        except Exception as e:
            logger.error(f"Failed to delete question {question_id}: {type(e).__name__}: {str(e)}")
            raise
        return result.deleted_count == 1
