"""Repository for Answer database operations."""

import logging
from datetime import datetime
from typing import List, Optional
from pymongo import ASCENDING, ReturnDocument
from pymongo.database import Database

from qaforum.database.database import ANSWERS, to_object_id
from qaforum.models.answer import Answer

logger = logging.getLogger(__name__)


def answer_from_document(doc: dict) -> Answer:
    return Answer(
        id=str(doc["_id"]),
        content=doc["content"],
        user_id=str(doc["user_id"]),
        question_id=str(doc["question_id"]),
        likes=[str(v) for v in doc.get("likes", [])],
        created_at=doc["created_at"],
    )


class AnswerRepository:
    """Repository for Answer database operations."""
    
    def __init__(self, db: Database):
        self.collection = db[ANSWERS]
    
    def create(self, *, content: str, user_id: str, question_id: str) -> Answer:
        """Insert a new answer."""
        doc = {
            "content": content,
            "user_id": to_object_id(user_id),
            "question_id": to_object_id(question_id),
            "likes": [],
            "created_at": datetime.utcnow(),
        }
        try:
            result = self.collection.insert_one(doc)
        except Exception as e:
            logger.error(f"Failed to create answer for question {question_id}: {type(e).__name__}: {str(e)}")
            raise
        doc["_id"] = result.inserted_id
        logger.debug(f"Created answer {result.inserted_id} for question {question_id}")
        return answer_from_document(doc)
    
    def get(self, question_id: str, answer_id: str) -> Optional[Answer]:
        """Get an answer by ID, scoped to its question."""
        doc = self.collection.find_one({
            "_id": to_object_id(answer_id),
            "question_id": to_object_id(question_id),
        })
        return answer_from_document(doc) if doc else None
    
    def find_by_question(self, question_id: str) -> List[Answer]:
        """All answers of a question, oldest first."""
        cursor = self.collection.find({"question_id": to_object_id(question_id)}).sort("created_at", ASCENDING)
        return [answer_from_document(doc) for doc in cursor]
    
    def update_content(self, answer_id: str, content: str) -> Optional[Answer]:
        try:
            doc = self.collection.find_one_and_update(
                {"_id": to_object_id(answer_id)},
                {"$set": {"content": content}},
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            logger.error(f"Failed to update answer {answer_id}: {type(e).__name__}: {str(e)}")
            raise
        return answer_from_document(doc) if doc else None
    
    def delete(self, answer_id: str) -> bool:
        try:
            result = self.collection.delete_one({"_id": to_object_id(answer_id)})
        except Exception as e:
            logger.error(f"Failed to delete answer {answer_id}: {type(e).__name__}: {str(e)}")
            raise
        return result.deleted_count == 1
    
    def delete_for_question(self, question_id: str) -> int:
        """Delete every answer of a question. Returns the number removed."""
        result = self.collection.delete_many({"question_id": to_object_id(question_id)})
        return result.deleted_count
    
    def add_like(self, answer_id: str, user_id: str) -> bool:
        """Append `user_id` to the answer's likes unless already present.
        
        Single atomic update; returns False when the user had already
        liked the answer (or the answer no longer exists).
        """
        user_oid = to_object_id(user_id)
        result = self.collection.update_one(
            {"_id": to_object_id(answer_id), "likes": {"$ne": user_oid}},
            {"$push": {"likes": user_oid}},
        )
        return result.modified_count == 1
