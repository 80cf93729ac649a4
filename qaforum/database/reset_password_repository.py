"""Repository for password-reset records."""

import logging
from datetime import datetime
from typing import Optional
from pymongo import ReturnDocument
from pymongo.database import Database

from qaforum.database.database import RESET_PASSWORDS, to_object_id
from qaforum.models.reset_password import ResetPasswordRecord

logger = logging.getLogger(__name__)


def record_from_document(doc: dict) -> ResetPasswordRecord:
    return ResetPasswordRecord(
        id=str(doc["_id"]),
        user_id=str(doc["user_id"]),
        reset_password_token=doc.get("reset_password_token") or "",
        reset_password_token_expire=doc["reset_password_token_expire"],
    )


class ResetPasswordRepository:
    """Repository for ResetPasswordRecord database operations."""
    
    def __init__(self, db: Database):
        self.collection = db[RESET_PASSWORDS]
    
    def create_for_user(self, user_id: str) -> ResetPasswordRecord:
        """Create the (inactive) reset record of a newly registered user."""
        doc = {
            "user_id": to_object_id(user_id),
            "reset_password_token": "",
            "reset_password_token_expire": datetime.utcnow(),
        }
        try:
            result = self.collection.insert_one(doc)
        except Exception as e:
            logger.error(f"Failed to create reset record for user {user_id}: {type(e).__name__}: {str(e)}")
            raise
        doc["_id"] = result.inserted_id
        return record_from_document(doc)
    
    def get_by_user(self, user_id: str) -> Optional[ResetPasswordRecord]:
        doc = self.collection.find_one({"user_id": to_object_id(user_id)})
        return record_from_document(doc) if doc else None
    
    def set_token(self, user_id: str, token: str, expires_at: datetime) -> Optional[ResetPasswordRecord]:
        """Store a new reset token. Returns None if the user has no record."""
        try:
            doc = self.collection.find_one_and_update(
                {"user_id": to_object_id(user_id)},
                {"$set": {"reset_password_token": token, "reset_password_token_expire": expires_at}},
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            logger.error(f"Failed to store reset token for user {user_id}: {type(e).__name__}: {str(e)}")
            raise
        return record_from_document(doc) if doc else None
    
    def clear_token(self, user_id: str) -> bool:
        """Deactivate the user's reset token. Returns True if a record matched."""
        result = self.collection.update_one(
            {"user_id": to_object_id(user_id)},
            {"$set": {"reset_password_token": ""}},
        )
        return result.matched_count == 1
