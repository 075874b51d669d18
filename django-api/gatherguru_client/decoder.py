"""Reads session claims out of a bearer token.

The signature is not verified here; the server checks it on every request.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

import jwt

from gatherguru_client.roles import Role
from gatherguru_client.tokens import TokenStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionClaims:
    id: str
    role: Role
    name: str
    email: str
    exp: int

    def is_expired(self, now_ms: int) -> bool:
        return self.exp * 1000 < now_ms


def read_claims(token: str) -> SessionClaims:
    """Decode the payload of ``token``.

    Raises:
        jwt.InvalidTokenError: If the token is malformed.
        ValueError: If a claim is missing or the role is unknown.
    """
    payload = jwt.decode(token, options={"verify_signature": False})
    try:
        return SessionClaims(
            id=str(payload["id"]),
            role=Role(payload["role"]),
            name=payload.get("name") or "",
            email=payload.get("email") or "",
            exp=int(payload["exp"]),
        )
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Missing or malformed claim: {exc}") from exc


def now_ms() -> int:
    return int(time.time() * 1000)


class SessionDecoder:
    """Turns the persisted token into claims, clearing it when unusable."""

    def __init__(self, tokens: TokenStore, clock: Callable[[], int] = now_ms) -> None:
        self._tokens = tokens
        self._clock = clock

    def decode(self, token: str | None) -> SessionClaims | None:
        if not token:
            return None
        try:
            claims = read_claims(token)
        except (jwt.InvalidTokenError, ValueError) as exc:
            logger.warning("Discarding invalid token: %s", exc)
            self._tokens.clear()
            return None
        if claims.is_expired(self._clock()):
            logger.info("Discarding expired token for %s", claims.id)
            self._tokens.clear()
            return None
        return claims
