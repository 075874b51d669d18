"""Django ORM implementation of the AccountStore."""

from django.contrib.auth.hashers import check_password, make_password
from django.db import IntegrityError

from accounts import models
from accounts.domain import Account, AccountId, AccountStatus, NewAccount, Role
from accounts.domain.errors import AccountExistsError
from accounts.stores.interfaces import AccountStore

UPDATABLE_FIELDS = {"name", "email", "phone", "organization", "is_verified", "status", "profile_photo"}


def to_domain(row: models.Account) -> Account:
    return Account(
        id=AccountId(row.id),
        role=Role(row.role),
        name=row.name,
        email=row.email,
        phone=row.phone,
        organization=row.organization,
        is_verified=row.is_verified,
        status=AccountStatus(row.status),
        profile_photo=row.profile_photo,
        created_at=row.created_at,
    )


class DjangoAccountStore(AccountStore):
    """Relational account store using Django ORM."""

    def get(self, account_id: AccountId) -> Account | None:
        row = models.Account.objects.filter(id=account_id.value).first()
        return to_domain(row) if row else None

    def find_by_email(self, email: str, role: Role) -> Account | None:
        row = models.Account.objects.filter(email__iexact=email, role=role.value).first()
        return to_domain(row) if row else None

    def create(self, new_account: NewAccount) -> Account:
        try:
            row = models.Account.objects.create(
                role=new_account.role.value,
                email=new_account.email.lower(),
                password=make_password(new_account.password),
                name=new_account.name,
                phone=new_account.phone,
                organization=new_account.organization,
            )
        except IntegrityError:
            raise AccountExistsError(new_account.role)
        return to_domain(row)

    def check_password(self, account_id: AccountId, password: str) -> bool:
        encoded = (
            models.Account.objects.filter(id=account_id.value)
            .values_list("password", flat=True)
            .first()
        )
        return bool(encoded) and check_password(password, encoded)

    def update(self, account_id: AccountId, **fields: object) -> Account | None:
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update account fields: {sorted(unknown)}")
        values = {
            key: value.value if isinstance(value, AccountStatus) else value
            for key, value in fields.items()
        }
        updated = models.Account.objects.filter(id=account_id.value).update(**values)
        return self.get(account_id) if updated else None

    def delete(self, account_id: AccountId) -> bool:
        deleted, _ = models.Account.objects.filter(id=account_id.value).delete()
        return deleted > 0

    def list_by_role(self, role: Role) -> list[Account]:
        return [to_domain(row) for row in models.Account.objects.filter(role=role.value)]

    def count(self, role: Role, status: AccountStatus | None = None) -> int:
        qs = models.Account.objects.filter(role=role.value)
        if status is not None:
            qs = qs.filter(status=status.value)
        return qs.count()
