"""Bearer token issuing and verification (HS256 JWT)."""

from dataclasses import dataclass
from datetime import datetime, timezone

import jwt
from django.conf import settings

from accounts.domain import Account, AccountId, Role


class InvalidTokenError(Exception):
    """Raised when a token is malformed, expired or carries unknown claims."""


@dataclass(frozen=True)
class TokenClaims:
    account_id: AccountId
    role: Role
    expires_at: datetime


def issue_token(account: Account, now: datetime | None = None) -> str:
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "id": str(account.id),
        "role": account.role.value,
        "name": account.name,
        "email": account.email,
        "iat": issued_at,
        "exp": issued_at + settings.JWT_LIFETIME,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> TokenClaims:
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "id", "role"]},
        )
        return TokenClaims(
            account_id=AccountId.from_string(payload["id"]),
            role=Role(payload["role"]),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
    except (jwt.PyJWTError, ValueError, TypeError) as exc:
        raise InvalidTokenError(str(exc)) from exc
