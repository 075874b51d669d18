"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from accounts.domain import Account, AccountId, AccountStatus, NewAccount, Role


class AccountStore(ABC):
    """Interface for account persistence operations."""

    @abstractmethod
    def get(self, account_id: AccountId) -> Account | None:
        """Return an account by ID, or None if not found."""
        ...

    @abstractmethod
    def find_by_email(self, email: str, role: Role) -> Account | None:
        ...

    @abstractmethod
    def create(self, new_account: NewAccount) -> Account:
        """Persist a new account; the password is stored hashed."""
        ...

    @abstractmethod
    def check_password(self, account_id: AccountId, password: str) -> bool:
        ...

    @abstractmethod
    def update(self, account_id: AccountId, **fields: object) -> Account | None:
        """Update the given fields and return the account, or None if not found."""
        ...

    @abstractmethod
    def delete(self, account_id: AccountId) -> bool:
        ...

    @abstractmethod
    def list_by_role(self, role: Role) -> list[Account]:
        """Return accounts with the role, newest first."""
        ...

    @abstractmethod
    def count(self, role: Role, status: AccountStatus | None = None) -> int:
        ...
