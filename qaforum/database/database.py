"""MongoDB connection and database access for qaForum."""

import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Request
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from qaforum.config import Settings

logger = logging.getLogger(__name__)

USERS = "users"
RESET_PASSWORDS = "reset_passwords"
QUESTIONS = "questions"
ANSWERS = "answers"


def get_client_kwargs(settings: Settings) -> dict:
    """Return deterministic MongoClient kwargs for the given settings.

    Separated so it can be unit tested without connecting.
    """
    return {
        "maxPoolSize": settings.mongo_max_pool_size,
        "serverSelectionTimeoutMS": settings.mongo_server_selection_timeout_ms,
        # Stored datetimes are naive UTC throughout the app.
        "tz_aware": False,
    }


def build_client(settings: Settings) -> MongoClient:
    logger.info(f"Connecting to MongoDB database {settings.mongo_db_name}")
    return MongoClient(settings.mongo_uri, **get_client_kwargs(settings))


def init_db(db: Database) -> None:
    """Create the indexes the application relies on (idempotent)."""
    db[USERS].create_index([("username", ASCENDING)], unique=True)
    db[USERS].create_index([("email", ASCENDING)], unique=True)
    db[RESET_PASSWORDS].create_index([("user_id", ASCENDING)], unique=True)
    db[QUESTIONS].create_index([("slug", ASCENDING)], unique=True)
    db[QUESTIONS].create_index([("user_id", ASCENDING)])
    db[ANSWERS].create_index([("question_id", ASCENDING)])
    logger.info("Database indexes ensured")


def get_db(request: Request) -> Database:
    """Get the application database (dependency for FastAPI)."""
    return request.app.state.db


def is_valid_object_id(value: Optional[str]) -> bool:
    return bool(value) and ObjectId.is_valid(value)


def to_object_id(value: str) -> ObjectId:
    """Convert a hex id to ObjectId.

    Raises:
        ValueError: If `value` is not a valid ObjectId
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise ValueError(f"Invalid object id: {value!r}") from e
