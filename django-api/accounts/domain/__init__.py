from accounts.domain.models import Account, NewAccount
from accounts.domain.value_objects import AccountId, AccountStatus, Role

__all__ = [
    "Account",
    "NewAccount",
    "AccountId",
    "AccountStatus",
    "Role",
]
