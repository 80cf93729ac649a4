"""Repository for User database operations."""

import logging
from datetime import datetime
from typing import Optional, Tuple
from pymongo.database import Database

from qaforum.database.database import USERS, to_object_id
from qaforum.models.user import User, UserRole

logger = logging.getLogger(__name__)

# Password hashes are never part of default reads.
PUBLIC_PROJECTION = {"password": 0}


def user_from_document(doc: dict) -> User:
    return User(
        id=str(doc["_id"]),
        name=doc["name"],
        username=doc["username"],
        email=doc["email"],
        role=doc.get("role", UserRole.USER.value),
        title=doc.get("title"),
        about=doc.get("about"),
        place=doc.get("place"),
        website=doc.get("website"),
        profile_image=doc.get("profile_image", "default.jpg"),
        blocked=doc.get("blocked", False),
        created_at=doc["created_at"],
    )


class UserRepository:
    """Repository for User database operations."""
    
    def __init__(self, db: Database):
        self.collection = db[USERS]
    
    def create(self, *, name: str, username: str, email: str, password_hash: str) -> User:
        """Insert a new user.
        
        Raises:
            pymongo.errors.DuplicateKeyError: If username or email is taken
        """
        doc = {
            "name": name,
            "username": username,
            "email": email,
            "password": password_hash,
            "role": UserRole.USER.value,
            "profile_image": "default.jpg",
            "blocked": False,
            "created_at": datetime.utcnow(),
        }
        try:
            result = self.collection.insert_one(doc)
        except Exception as e:
            logger.error(f"Failed to create user {username}: {type(e).__name__}: {str(e)}")
            raise
        doc["_id"] = result.inserted_id
        logger.debug(f"Created user {result.inserted_id}: {email}")
        return user_from_document(doc)
    
    def get(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        doc = self.collection.find_one({"_id": to_object_id(user_id)}, PUBLIC_PROJECTION)
        return user_from_document(doc) if doc else None
    
    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        doc = self.collection.find_one({"email": email}, PUBLIC_PROJECTION)
        return user_from_document(doc) if doc else None
    
    def get_credentials(self, email: str) -> Optional[Tuple[User, str]]:
        """Get a user together with the stored password hash (login only)."""
        doc = self.collection.find_one({"email": email})
        if not doc:
            return None
        return user_from_document(doc), doc.get("password", "")
    
    def delete(self, user_id: str) -> bool:
        """Delete a user. Returns True if a document was removed."""
        try:
            result = self.collection.delete_one({"_id": to_object_id(user_id)})
        except Exception as e:
            logger.error(f"Failed to delete user {user_id}: {type(e).__name__}: {str(e)}")
            raise
        return result.deleted_count == 1
