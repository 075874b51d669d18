"""Role and account-status permissions."""

from rest_framework import permissions

from accounts.domain import Role
from accounts.domain.errors import AccountNotActiveError
from accounts.stores.django_store import DjangoAccountStore

FORBIDDEN_MESSAGE = "Not authorized to access this route"


class HasRole(permissions.BasePermission):
    role: Role
    message = FORBIDDEN_MESSAGE

    def has_permission(self, request, view) -> bool:
        user = request.user
        return bool(user and user.is_authenticated and user.role is self.role)


class IsAdmin(HasRole):
    role = Role.ADMIN


class IsOrganizer(HasRole):
    role = Role.ORGANIZER


class IsAttendee(HasRole):
    role = Role.USER


class IsActiveAccount(permissions.BasePermission):
    """Re-reads the account status so blocks apply to live tokens."""

    def has_permission(self, request, view) -> bool:
        user = request.user
        if not (user and user.is_authenticated):
            return False
        account = DjangoAccountStore().get(user.id)
        if account is not None and not account.is_active:
            raise AccountNotActiveError(account.status)
        return True
