"""Authentication service - registration, login and own-profile management.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Return domain models or raise domain errors
"""

import logging
from collections.abc import Callable

from accounts.domain import Account, AccountId, NewAccount, Role
from accounts.domain.errors import (
    AccountExistsError,
    AccountNotActiveError,
    AccountNotFoundError,
    InvalidCredentialsError,
    MissingCredentialsError,
)
from accounts.stores.interfaces import AccountStore
from accounts.tokens import issue_token
from common.images import ImageStore

logger = logging.getLogger(__name__)

PROFILE_FIELDS = {
    Role.USER: {"name", "phone"},
    Role.ORGANIZER: {"name", "phone", "organization"},
    Role.ADMIN: {"name", "email", "phone"},
}

LOGIN_FAILURE_MESSAGES = {
    Role.USER: "Invalid email or password",
    Role.ORGANIZER: "Invalid credentials",
    Role.ADMIN: "Invalid credentials",
}


class AuthService:
    """Service for account registration and sign-in."""

    def __init__(
        self,
        store: AccountStore,
        image_store: ImageStore | None = None,
        token_issuer: Callable[[Account], str] = issue_token,
    ) -> None:
        self._store = store
        self._images = image_store
        self._issue_token = token_issuer

    def register(self, new_account: NewAccount) -> tuple[Account, str]:
        """Create an account and return it with a fresh token.

        Raises:
            AccountExistsError: If the email is taken for this role.
        """
        if self._store.find_by_email(new_account.email, new_account.role) is not None:
            raise AccountExistsError(new_account.role)
        account = self._store.create(new_account)
        logger.info("Registered %s account %s", account.role.value, account.id)
        return account, self._issue_token(account)

    def login(self, role: Role, email: str, password: str) -> tuple[Account, str]:
        """Check credentials and return the account with a fresh token.

        Raises:
            MissingCredentialsError: If email or password is empty.
            InvalidCredentialsError: If no account matches.
            AccountNotActiveError: If the account is inactive or blocked.
        """
        if not email or not password:
            raise MissingCredentialsError()

        account = self._store.find_by_email(email, role)
        if account is None or not self._store.check_password(account.id, password):
            logger.info("Failed %s login for %s", role.value, email)
            raise InvalidCredentialsError(LOGIN_FAILURE_MESSAGES[role])
        if not account.is_active:
            raise AccountNotActiveError(account.status)
        return account, self._issue_token(account)

    def get_account(self, account_id: AccountId, role: Role) -> Account:
        account = self._store.get(account_id)
        if account is None or account.role is not role:
            raise AccountNotFoundError(role)
        return account

    def update_profile(self, account_id: AccountId, role: Role, changes: dict) -> Account:
        """Apply non-empty profile changes allowed for the role."""
        account = self.get_account(account_id, role)
        fields = {
            key: value
            for key, value in changes.items()
            if key in PROFILE_FIELDS[role] and value
        }
        email = fields.get("email")
        if email and email.lower() != account.email.lower():
            if self._store.find_by_email(email, role) is not None:
                raise AccountExistsError(role)
            fields["email"] = email.lower()
        if not fields:
            return account
        return self._store.update(account_id, **fields) or account

    def update_photo(self, account_id: AccountId, role: Role, image: str, folder: str) -> Account:
        """Store a new profile photo and drop the previous one."""
        if self._images is None:
            raise RuntimeError("AuthService was built without an image store")
        account = self.get_account(account_id, role)
        url = self._images.save(image, folder)
        if account.profile_photo:
            self._images.delete(account.profile_photo)
        return self._store.update(account_id, profile_photo=url) or account
