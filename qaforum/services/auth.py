"""Registration, login and current-user lookup."""

import logging
import re
from typing import Optional

from pymongo.errors import DuplicateKeyError

from qaforum.auth.passwords import DEFAULT_ROUNDS, MAX_PASSWORD_BYTES, hash_password, verify_password
from qaforum.database.reset_password_repository import ResetPasswordRepository
from qaforum.database.user_repository import UserRepository
from qaforum.errors import AuthError, NotFoundError, ValidationError
from qaforum.models.identity import AuthenticatedUser
from qaforum.models.user import User
from qaforum.services.validation import require_min_length, require_object_id, require_value

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^([\w\-.]+@([\w-]+\.)+[\w-]{2,4})?$")
PASSWORD_MIN_LENGTH = 6


class AuthService:
    """User registration and credential checks."""

    def __init__(
        self,
        users: UserRepository,
        reset_passwords: ResetPasswordRepository,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ):
        self.users = users
        self.reset_passwords = reset_passwords
        self.bcrypt_rounds = bcrypt_rounds

    def register(
        self,
        *,
        name: Optional[str],
        username: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> User:
        """Create a user and its (inactive) password-reset record.

        Raises:
            ValidationError: On missing/invalid fields or a taken username/e-mail
            CredentialHashingError: If the password cannot be hashed
        """
        require_value(name, "Please provide a name.")
        require_value(username, "Please provide a username value")
        require_value(email, "Please provide an e-mail address.")
        if not EMAIL_PATTERN.match(email):
            raise ValidationError("Please provide a valid e-mail")
        require_value(password, "Please provide a password")
        require_min_length(password, PASSWORD_MIN_LENGTH, "Please provide a password longer than 6 characters")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError("Please provide a password of at most 72 bytes")

        password_hash = hash_password(password, rounds=self.bcrypt_rounds)

        try:
            user = self.users.create(name=name, username=username, email=email, password_hash=password_hash)
        except DuplicateKeyError as e:
            raise ValidationError("That username or e-mail address is already in use.") from e

        try:
            self.reset_passwords.create_for_user(user.id)
        except Exception:
            # Registration is all-or-nothing.
            self.users.delete(user.id)
            raise

        logger.info(f"Registered user {user.id} ({user.username})")
        return user

    def login(self, *, email: Optional[str], password: Optional[str]) -> User:
        """Check credentials and return the matching user.

        Raises:
            ValidationError: If e-mail or password is missing
            NotFoundError: If no user has that e-mail
            AuthError: If the password does not match (400)
        """
        require_value(email, "Please provide an e-mail address to login")
        require_value(password, "Please provide a password to login")

        credentials = self.users.get_credentials(email)
        if credentials is None:
            raise NotFoundError("There is no user with that e-mail address.")

        user, password_hash = credentials
        if not verify_password(password, password_hash):
            logger.info(f"Rejected login for user {user.id}: wrong password")
            raise AuthError("Password is incorrect.", 400)

        logger.info(f"User {user.id} logged in")
        return user

    def me(self, identity: AuthenticatedUser) -> User:
        """The stored user behind an authenticated identity."""
        require_object_id(identity.id, "user")
        user = self.users.get(identity.id)
        if user is None:
            raise NotFoundError("There is no user with that id.")
        return user
