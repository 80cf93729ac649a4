"""Password hashing for qaForum (bcrypt)."""

import logging
import bcrypt

from qaforum.errors import CredentialHashingError

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 12
# bcrypt only accepts inputs up to this many bytes.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password with a fresh bcrypt salt.
    
    Args:
        password: Plaintext password
        rounds: bcrypt cost factor
        
    Returns:
        Encoded bcrypt hash
        
    Raises:
        CredentialHashingError: If bcrypt rejects the input
    """
    try:
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    except (ValueError, TypeError) as e:
        logger.error(f"Failed to hash password: {type(e).__name__}: {str(e)}")
        raise CredentialHashingError("Password could not be processed.") from e
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.
    
    Returns:
        True if they match. A malformed hash or an input bcrypt refuses
        to process never matches.
    """
    if not plain_password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False
