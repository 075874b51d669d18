"""DRF authentication for bearer tokens.

The token is read from the ``Authorization: Bearer`` header, falling back
to the ``token`` cookie set at login.
"""

import logging
from dataclasses import dataclass

from django.conf import settings
from rest_framework import authentication, exceptions

from accounts.domain import Account, AccountId, Role
from accounts.stores.django_store import DjangoAccountStore
from accounts.tokens import InvalidTokenError, verify_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, exposed as ``request.user``."""

    account: Account

    is_authenticated = True

    @property
    def id(self) -> AccountId:
        return self.account.id

    @property
    def role(self) -> Role:
        return self.account.role


def extract_token(request) -> str | None:
    header = authentication.get_authorization_header(request).decode("latin-1")
    if header.startswith("Bearer"):
        parts = header.split()
        return parts[1] if len(parts) == 2 else None
    return request.COOKIES.get(settings.AUTH_COOKIE_NAME) or None


class BearerTokenAuthentication(authentication.BaseAuthentication):
    def authenticate(self, request):
        token = extract_token(request)
        if not token:
            return None

        try:
            claims = verify_token(token)
        except InvalidTokenError as exc:
            logger.info("Rejected bearer token: %s", exc)
            raise exceptions.AuthenticationFailed("Invalid or expired token")

        account = DjangoAccountStore().get(claims.account_id)
        if account is None or account.role is not claims.role:
            raise exceptions.AuthenticationFailed(f"{claims.role.label} not found")
        return Principal(account), token

    def authenticate_header(self, request) -> str:
        return 'Bearer realm="api"'
