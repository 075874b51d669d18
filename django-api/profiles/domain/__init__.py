from profiles.domain.models import PROFILE_FIELDS, UserProfile

__all__ = ["PROFILE_FIELDS", "UserProfile"]
