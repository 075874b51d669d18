"""Attendee management for admins."""

import logging

from accounts.domain import Account, AccountId, AccountStatus, Role
from accounts.domain.errors import AccountNotFoundError, InvalidAccountIdError
from accounts.stores.interfaces import AccountStore

logger = logging.getLogger(__name__)


def parse_account_id(account_id: str) -> AccountId:
    try:
        return AccountId.from_string(account_id)
    except ValueError:
        raise InvalidAccountIdError()


class AccountAdminService:
    def __init__(self, store: AccountStore) -> None:
        self._store = store

    def list_attendees(self) -> list[Account]:
        return self._store.list_by_role(Role.USER)

    def get_attendee(self, account_id: str) -> Account:
        account = self._store.get(parse_account_id(account_id))
        if account is None or account.role is not Role.USER:
            raise AccountNotFoundError(Role.USER)
        return account

    def set_status(self, account_id: str, status: AccountStatus) -> Account:
        account = self.get_attendee(account_id)
        updated = self._store.update(account.id, status=status)
        if updated is None:
            raise AccountNotFoundError(Role.USER)
        logger.info("Attendee %s status changed %s -> %s", account.id, account.status.value, status.value)
        return updated

    def delete_attendee(self, account_id: str) -> None:
        account = self.get_attendee(account_id)
        self._store.delete(account.id)
        logger.info("Deleted attendee %s", account.id)
