"""Account maintenance: forgotten passwords."""

import logging
from typing import Optional

from pymongo.errors import PyMongoError

from qaforum.auth.reset_tokens import generate_reset_token
from qaforum.database.reset_password_repository import ResetPasswordRepository
from qaforum.database.user_repository import UserRepository
from qaforum.errors import DependencyError, EmailDeliveryError, NotFoundError
from qaforum.integrations.email import EmailSender
from qaforum.services.validation import require_value

logger = logging.getLogger(__name__)

RESET_EMAIL_SUBJECT = "Reset Password Token"


def build_reset_password_url(base_url: str, token: str) -> str:
    return f"{base_url}?resetPasswordToken={token}"


class AccountService:
    """Password-reset token lifecycle."""

    def __init__(
        self,
        users: UserRepository,
        reset_passwords: ResetPasswordRepository,
        email_sender: EmailSender,
        reset_password_url: str,
    ):
        self.users = users
        self.reset_passwords = reset_passwords
        self.email_sender = email_sender
        self.reset_password_url = reset_password_url

    def forgot_password(self, email: Optional[str]) -> None:
        """Issue a reset token for `email` and mail the reset link.

        If the mail cannot be delivered the stored token is cleared again so
        no usable token is left behind that the user never received.

        Raises:
            ValidationError: If no e-mail was given
            NotFoundError: If no user has that e-mail
            DependencyError: If the reset record is missing or the mail fails
        """
        require_value(email, "Please provide an e-mail address.")

        user = self.users.get_by_email(email)
        if user is None:
            raise NotFoundError("There is no user with that e-mail")

        reset = generate_reset_token()
        record = self.reset_passwords.set_token(user.id, reset.token, reset.expires_at)
        if record is None:
            logger.error(f"User {user.id} has no reset-password record")
            raise DependencyError("Please try again later.")

        reset_url = build_reset_password_url(self.reset_password_url, reset.token)
        html = (
            "<h3>Reset Your Password</h3>"
            f"<p>This <a href='{reset_url}' target='_blank'>link</a> will expire in 1 hour</p>"
        )

        try:
            self.email_sender.send_email(email, RESET_EMAIL_SUBJECT, html)
        except EmailDeliveryError:
            self._clear_token(user.id)
            raise

        logger.info(f"Reset password link sent to user {user.id}")

    def _clear_token(self, user_id: str) -> None:
        # Best effort; the delivery failure is what gets reported.
        try:
            self.reset_passwords.clear_token(user_id)
        except PyMongoError as e:
            logger.error(f"Failed to clear reset token for user {user_id}: {type(e).__name__}: {str(e)}")
