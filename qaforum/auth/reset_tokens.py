"""Password-reset token generation.

Reset tokens are single-use random secrets handed to the user by e-mail.
They expire one hour after generation.
"""

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

RESET_TOKEN_TTL = timedelta(hours=1)


@dataclass(frozen=True)
class ResetToken:
    token: str
    expires_at: datetime


def generate_reset_token(now: Optional[datetime] = None) -> ResetToken:
    """Generate a new reset token valid for one hour from `now`."""
    issued_at = now or datetime.utcnow()
    # 64 hex chars, safe to embed in a query string
    return ResetToken(token=secrets.token_hex(32), expires_at=issued_at + RESET_TOKEN_TTL)
